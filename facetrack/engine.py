"""
Association Engine
==================

Greedy nearest-neighbor association of face detections to tracks.

Each cycle runs five phases in strict order against one captured
``cycle_time``:

1. Expire tracks unmatched for longer than ``age_limit``
2. Find the nearest track for every detection (within threshold)
3. Enforce a single claim per track (nearest claimant wins)
4. Update matched tracks, create tracks for unmatched detections
5. Prune glitch tracks (created earlier, never reinforced)

Ties are deterministic: the earliest-created track wins in phase 2 and the
lowest detection index wins in phase 3. A detection that loses a claim in
phase 3 is not re-matched against another track; it spawns a new track.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from facetrack.colors import ColorAllocator
from facetrack.config import TrackerConfig
from facetrack.distance import DistanceMetric
from facetrack.geometry import Rect, RectLike, as_rect
from facetrack.track_store import TrackStore
from facetrack.types import Track

logger = logging.getLogger(__name__)

# (track, distance) claimed by a detection, or None
Claim = Optional[Tuple[Track, float]]


@dataclass
class CycleResult:
    """Summary of what one tick changed."""

    cycle_time: float
    expired: List[int] = field(default_factory=list)
    matched: Dict[int, int] = field(default_factory=dict)  # detection index -> track_id
    created: List[int] = field(default_factory=list)
    pruned: List[int] = field(default_factory=list)
    conflicts: int = 0

    @property
    def num_detections(self) -> int:
        return len(self.matched) + len(self.created)


class AssociationEngine:
    """Owns the track store and advances it one cycle at a time."""

    def __init__(
        self,
        config: Optional[TrackerConfig] = None,
        store: Optional[TrackStore] = None,
        color_allocator: Optional[ColorAllocator] = None,
    ):
        self.config = config or TrackerConfig()
        self.store = store if store is not None else TrackStore()
        self.metric = DistanceMetric(self.config.distance)
        self.colors = color_allocator or ColorAllocator(self.config.colors)

        self.next_id = 1
        self.total_tracks = 0
        self.cycle_count = 0
        self.last_cycle_time: Optional[float] = None

    def tick(self, detections: Iterable[RectLike], cycle_time: float) -> CycleResult:
        """
        Advance tracking by one cycle.

        Args:
            detections: Rectangles found in the current frame (x, y, w, h)
            cycle_time: Timestamp captured once for this cycle

        Returns:
            CycleResult describing matches, new tracks and removals
        """
        if self.last_cycle_time is not None and cycle_time < self.last_cycle_time:
            raise ValueError(
                f"cycle_time must not decrease: got {cycle_time} after {self.last_cycle_time}"
            )
        rects = [as_rect(d) for d in detections]
        self.last_cycle_time = cycle_time
        self.cycle_count += 1

        result = CycleResult(cycle_time=cycle_time)

        result.expired = self._remove_old_tracks(cycle_time)
        claims = self._find_nearest_tracks(rects, cycle_time)
        result.conflicts = self._enforce_single_claim(claims)
        result.matched, result.created = self._apply_claims(rects, claims, cycle_time)
        result.pruned = self._remove_glitch_tracks(cycle_time)

        logger.debug(
            f"cycle t={cycle_time}: {len(rects)} detections, {len(result.matched)} matched, "
            f"{len(result.created)} created, {len(result.expired)} expired, "
            f"{len(result.pruned)} pruned, {result.conflicts} conflicts, {len(self.store)} tracks"
        )
        return result

    # ------------------------------------------------------------------
    # Phase 1
    # ------------------------------------------------------------------
    def _remove_old_tracks(self, cycle_time: float) -> List[int]:
        age_limit = self.config.lifecycle.age_limit
        removed = self.store.remove_where(lambda t: t.time_since_matched(cycle_time) > age_limit)
        return [t.track_id for t in removed]

    # ------------------------------------------------------------------
    # Phase 2
    # ------------------------------------------------------------------
    def _find_nearest_tracks(self, rects: List[Rect], cycle_time: float) -> List[Claim]:
        tracks = list(self.store)
        claims: List[Claim] = []
        for rect in rects:
            if rect.area == 0:
                logger.warning(f"Zero-area detection {rect.to_list()} is infinitely far from every track")
            nearest: Claim = None
            for track in tracks:
                distance = self.metric.distance(rect, track, cycle_time)
                # strict comparison keeps the earliest-created track on ties
                if nearest is None or distance < nearest[1]:
                    nearest = (track, distance)
            if nearest is not None and not self.metric.is_within_threshold(nearest[1]):
                nearest = None
            claims.append(nearest)
        return claims

    # ------------------------------------------------------------------
    # Phase 3
    # ------------------------------------------------------------------
    def _enforce_single_claim(self, claims: List[Claim]) -> int:
        """Drop all but the nearest claim on each over-claimed track."""
        claimants: Dict[int, List[int]] = defaultdict(list)
        for idx, claim in enumerate(claims):
            if claim is not None:
                claimants[claim[0].track_id].append(idx)

        conflicts = 0
        for track_id, indices in claimants.items():
            if len(indices) < 2:
                continue
            conflicts += 1
            winner = min(indices, key=lambda i: (claims[i][1], i))
            for idx in indices:
                if idx != winner:
                    claims[idx] = None
            logger.debug(f"track {track_id} claimed by detections {indices}; kept {winner}")
        return conflicts

    # ------------------------------------------------------------------
    # Phase 4
    # ------------------------------------------------------------------
    def _apply_claims(
        self,
        rects: List[Rect],
        claims: List[Claim],
        cycle_time: float,
    ) -> Tuple[Dict[int, int], List[int]]:
        matched: Dict[int, int] = {}
        created: List[int] = []
        for idx, (rect, claim) in enumerate(zip(rects, claims)):
            if claim is None:
                track = self._create_track(rect, cycle_time)
                created.append(track.track_id)
            else:
                track = claim[0]
                track.update(rect, cycle_time)
                matched[idx] = track.track_id
        return matched, created

    def _create_track(self, rect: Rect, cycle_time: float) -> Track:
        in_use = {t.color for t in self.store}
        track = Track(
            track_id=self.next_id,
            current_rect=rect,
            created_at=cycle_time,
            color=self.colors.allocate(avoid=in_use),
        )
        self.store.add(track)
        self.next_id += 1
        self.total_tracks += 1
        return track

    # ------------------------------------------------------------------
    # Phase 5
    # ------------------------------------------------------------------
    def _remove_glitch_tracks(self, cycle_time: float) -> List[int]:
        """Remove tracks created in an earlier cycle that were never matched since."""
        removed = self.store.remove_where(
            lambda t: t.match_count == 0 and t.last_matched_at != cycle_time
        )
        return [t.track_id for t in removed]

    def reset(self) -> None:
        """Clear all tracking data"""
        self.store.clear()
        self.next_id = 1
        self.total_tracks = 0
        self.cycle_count = 0
        self.last_cycle_time = None
