"""
Tracker Data Types
==================

Typed data structures that flow through the tracker:

    Rect (detection) → Track → reported size / position / movement
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from facetrack.geometry import Point, Rect, centroid


@dataclass(frozen=True)
class Color:
    """RGB identity color (0-255 per channel)."""
    r: int
    g: int
    b: int

    def to_bgr(self) -> Tuple[int, int, int]:
        """Channel order expected by OpenCV drawing calls."""
        return (self.b, self.g, self.r)

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(eq=False)
class Track:
    """
    One tracked face identity.

    Tracks compare by identity; ``track_id`` is the key used in maps.
    """

    track_id: int
    current_rect: Rect
    created_at: float
    color: Color
    previous_rect: Optional[Rect] = None
    last_matched_at: Optional[float] = None
    match_count: int = 0

    def __post_init__(self):
        if self.previous_rect is None:
            self.previous_rect = self.current_rect
        if self.last_matched_at is None:
            self.last_matched_at = self.created_at

    @property
    def centroid(self) -> Point:
        return centroid(self.current_rect)

    @property
    def direction(self) -> Point:
        """Centroid displacement between the two most recent rects."""
        return centroid(self.current_rect) - centroid(self.previous_rect)

    def update(self, rect: Rect, cycle_time: float) -> None:
        """Record a match in the current cycle."""
        self.previous_rect = self.current_rect
        self.current_rect = rect
        self.last_matched_at = cycle_time
        self.match_count += 1

    def time_since_matched(self, cycle_time: float) -> float:
        return cycle_time - self.last_matched_at

    def age(self, cycle_time: float) -> float:
        return cycle_time - self.created_at

    def to_dict(self) -> Dict[str, Any]:
        """Export track info."""
        return {
            "track_id": self.track_id,
            "rect": self.current_rect.to_list(),
            "previous_rect": self.previous_rect.to_list(),
            "created_at": self.created_at,
            "last_matched_at": self.last_matched_at,
            "match_count": self.match_count,
            "color": self.color.hex,
        }
