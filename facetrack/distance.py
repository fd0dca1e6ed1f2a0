"""
Detection-to-track dissimilarity.

Not a true metric: positional offsets are scaled by the *detection's* area
only, so ``distance(a, track_of_b) != distance(b, track_of_a)`` in general.
"""

import math

from facetrack.config import DistanceConfig
from facetrack.geometry import Rect, centroid
from facetrack.types import Track


class DistanceMetric:
    """Combines position, size and staleness into one score."""

    def __init__(self, config: DistanceConfig):
        self.config = config

    def size_factor(self, rect: Rect) -> float:
        if not self.config.use_size_factor:
            return 1.0
        return rect.area / self.config.size_factor

    def adjusted_staleness(self, track: Track, cycle_time: float) -> float:
        return track.time_since_matched(cycle_time) * self.config.time_weight

    def adjusted_size(self, rect: Rect) -> float:
        return rect.area * self.config.area_weight

    def distance(self, rect: Rect, track: Track, cycle_time: float) -> float:
        size_factor = self.size_factor(rect)
        if size_factor == 0:
            # zero-area detection cannot be scaled
            return math.inf

        rect_cent = centroid(rect)
        track_cent = track.centroid
        dx = (rect_cent.x - track_cent.x) / size_factor
        dy = (rect_cent.y - track_cent.y) / size_factor
        d_area = self.adjusted_size(rect) - self.adjusted_size(track.current_rect)
        d_time = self.adjusted_staleness(track, cycle_time)
        return math.sqrt(dx * dx + dy * dy + d_area * d_area + d_time * d_time)

    def is_within_threshold(self, distance: float) -> bool:
        if self.config.allow_all_distances:
            return True
        return distance < self.config.distance_threshold
