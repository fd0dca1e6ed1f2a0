"""Container that owns the current set of face tracks."""

from typing import Callable, Dict, Iterator, List, Optional

from facetrack.types import Track


class TrackStore:
    """Tracks keyed by engine-assigned ``track_id``, iterated in creation order."""

    def __init__(self):
        self._tracks: Dict[int, Track] = {}

    def __iter__(self) -> Iterator[Track]:
        return iter(list(self._tracks.values()))

    def __len__(self) -> int:
        return len(self._tracks)

    def __contains__(self, track_id: int) -> bool:
        return track_id in self._tracks

    def get(self, track_id: int) -> Optional[Track]:
        return self._tracks.get(track_id)

    def add(self, track: Track) -> None:
        if track.track_id in self._tracks:
            raise KeyError(f"track {track.track_id} already in store")
        self._tracks[track.track_id] = track

    def remove(self, track_id: int) -> Track:
        return self._tracks.pop(track_id)

    def remove_where(self, predicate: Callable[[Track], bool]) -> List[Track]:
        """Remove every track matching ``predicate`` and return them."""
        removed = [t for t in self._tracks.values() if predicate(t)]
        for track in removed:
            del self._tracks[track.track_id]
        return removed

    def ids(self) -> List[int]:
        return list(self._tracks)

    def clear(self) -> None:
        self._tracks.clear()
