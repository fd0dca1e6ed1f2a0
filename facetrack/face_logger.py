"""
Face Logger
===========

Entry point for consumers: feed detections once per frame with ``tick`` and
read back stable face identities.

Example:
    logger = FaceLogger()
    for frame in frames:
        rects = detector.detectMultiScale(gray)
        logger.tick(rects)
        logger.mark_faces(frame)
        print(logger.count_faces(), logger.face_positions())
"""

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional, Any

import cv2
import numpy as np

from facetrack.colors import ColorAllocator
from facetrack.config import TrackerConfig
from facetrack.engine import AssociationEngine, CycleResult
from facetrack.geometry import Point, RectLike, calculate_distance
from facetrack.track_store import TrackStore
from facetrack.types import Color, Track
from facetrack.visibility import VisibilityPolicy

logger = logging.getLogger(__name__)


def wall_clock_millis() -> float:
    return time.time() * 1000.0


class FaceLogger:
    """Tracks faces across frames and exposes the visible ones."""

    def __init__(
        self,
        config: Optional[TrackerConfig] = None,
        clock: Callable[[], float] = wall_clock_millis,
        color_allocator: Optional[ColorAllocator] = None,
    ):
        """
        Args:
            config: Tracker configuration (defaults to get_default_config())
            clock: Returns the current time, read once per cycle
            color_allocator: Override for identity color generation
        """
        self.config = config or TrackerConfig()
        self.clock = clock
        self.engine = AssociationEngine(self.config, TrackStore(), color_allocator)
        self.visibility = VisibilityPolicy(self.config.lifecycle, self.config.counting)
        self.cycle_time: float = 0.0
        self.last_result: Optional[CycleResult] = None

    @property
    def tracks(self) -> List[Track]:
        return list(self.engine.store)

    def tick(self, rects: Iterable[RectLike], timestamp: Optional[float] = None) -> CycleResult:
        """Run one association cycle. ``timestamp`` overrides the clock."""
        cycle_time = self.clock() if timestamp is None else timestamp
        if rects is None:
            rects = []
        self.last_result = self.engine.tick(rects, cycle_time)
        self.cycle_time = cycle_time
        return self.last_result

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def reportable_tracks(self) -> List[Track]:
        return [t for t in self.engine.store if self.visibility.is_reportable(t, self.cycle_time)]

    def count_faces(self) -> int:
        """Number of faces, including established ones that just dropped out."""
        return sum(1 for t in self.engine.store if self.visibility.is_countable(t, self.cycle_time))

    def face_sizes(self) -> Dict[Color, float]:
        return {t.color: t.current_rect.area for t in self.reportable_tracks()}

    def face_positions(self) -> Dict[Color, Point]:
        return {t.color: t.centroid for t in self.reportable_tracks()}

    def face_movements(self) -> Dict[Color, Point]:
        return {t.color: t.direction for t in self.reportable_tracks()}

    def mark_faces(self, image: np.ndarray, thickness: int = 1) -> np.ndarray:
        """Draw reportable faces onto a BGR image in place and return it."""
        for track in self.reportable_tracks():
            x1, y1, x2, y2 = track.current_rect.to_corners()
            cv2.rectangle(image, (x1, y1), (x2, y2), track.color.to_bgr(), thickness)
        return image

    def log_tracks(self) -> None:
        """Dump every track at debug level."""
        metric = self.engine.metric
        for track in self.engine.store:
            direction = track.direction
            logger.debug(
                f"track {track.track_id} ({track.color.hex}): "
                f"t={metric.adjusted_staleness(track, self.cycle_time):.1f} "
                f"x={track.centroid.x:.1f} y={track.centroid.y:.1f} "
                f"z={metric.adjusted_size(track.current_rect):.1f} "
                f"dx={direction.x:.1f} dy={direction.y:.1f} "
                f"speed={calculate_distance(direction, Point(0.0, 0.0)):.1f}"
            )

    def get_statistics(self) -> Dict[str, Any]:
        """Get tracking statistics."""
        return {
            "total_tracks": self.engine.total_tracks,
            "active_tracks": len(self.engine.store),
            "reportable_tracks": len(self.reportable_tracks()),
            "face_count": self.count_faces(),
            "cycle_count": self.engine.cycle_count,
        }

    def reset(self) -> None:
        self.engine.reset()
        self.cycle_time = 0.0
        self.last_result = None
