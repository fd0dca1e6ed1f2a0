"""
Identity Colors
===============

Random track colors that stay readable against the overlay background.
"""

import logging
import math
from typing import Collection, Optional, Tuple

import numpy as np

from facetrack.config import ColorConfig
from facetrack.types import Color

logger = logging.getLogger(__name__)


class ColorAllocationError(RuntimeError):
    """Raised when no color can satisfy the required background separation."""


def color_distance(color: Color, other: Tuple[int, int, int]) -> int:
    """Euclidean RGB distance, truncated to an integer."""
    dr = color.r - other[0]
    dg = color.g - other[1]
    db = color.b - other[2]
    return int(math.sqrt(dr * dr + dg * dg + db * db))


def max_reachable_distance(background: Tuple[int, int, int]) -> int:
    """Largest distance any RGB color can have from ``background``."""
    farthest = Color(*(0 if c > 127 else 255 for c in background))
    return color_distance(farthest, background)


class ColorAllocator:
    """Rejection-samples colors at least ``required_color_distance`` from the background."""

    def __init__(self, config: Optional[ColorConfig] = None):
        self.config = config or ColorConfig()
        self.background = self.config.background_color
        self.required_distance = self.config.required_color_distance
        self.rng = np.random.default_rng(self.config.seed)

        reachable = max_reachable_distance(self.background)
        if self.required_distance > reachable:
            raise ColorAllocationError(
                f"required_color_distance={self.required_distance} is unsatisfiable: "
                f"no RGB color is farther than {reachable} from {self.background}"
            )

    def _sample(self) -> Color:
        r, g, b = self.rng.integers(0, 256, size=3)
        return Color(int(r), int(g), int(b))

    def is_acceptable(self, color: Color) -> bool:
        return color_distance(color, self.background) >= self.required_distance

    def allocate(self, avoid: Collection[Color] = ()) -> Color:
        """Return a fresh color, resampling until it contrasts with the background."""
        for attempt in range(1, self.config.max_attempts + 1):
            color = self._sample()
            if self.is_acceptable(color) and color not in avoid:
                if attempt > 100:
                    logger.warning(f"Color allocation needed {attempt} attempts; separation may be too strict")
                return color
        raise ColorAllocationError(
            f"No acceptable color after {self.config.max_attempts} attempts "
            f"(background={self.background}, required distance={self.required_distance})"
        )
