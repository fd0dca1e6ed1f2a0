"""
Track visibility rules.

Two independent predicates:

- *reportable*: stable enough to draw and to expose size/position/movement.
  Hidden almost as soon as the face is lost.
- *countable*: included in the face count. Uses hysteresis so the displayed
  count does not flicker when a well-established face drops out briefly.
"""

from facetrack.config import CountingConfig, LifecycleConfig
from facetrack.types import Track


class VisibilityPolicy:
    def __init__(self, lifecycle: LifecycleConfig, counting: CountingConfig):
        self.lifecycle = lifecycle
        self.counting = counting

    def is_reportable(self, track: Track, cycle_time: float) -> bool:
        return (
            track.match_count >= 1
            and track.time_since_matched(cycle_time) <= self.lifecycle.show_age_limit
        )

    def is_countable(self, track: Track, cycle_time: float) -> bool:
        since_matched = track.time_since_matched(cycle_time)

        # matched this cycle, excluding newborn tracks
        active = track.last_matched_at == cycle_time and track.match_count > 0
        # rapidly reconfirmed track that just dropped out
        freshman = (
            since_matched < self.counting.freshman_window
            and track.match_count > self.counting.freshman_min_matches
        )
        # long-lived track within its grace period
        veteran = (
            since_matched < self.counting.veteran_window
            and track.age(cycle_time) > self.counting.veteran_min_age
        )
        return active or freshman or veteran
