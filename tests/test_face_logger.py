"""
Test Face Logger
================

Validate the consumer-facing facade: clock capture, visibility-filtered
queries, count hysteresis and the OpenCV overlay.
"""

import numpy as np
import pytest

from facetrack.config import ColorConfig, TrackerConfig
from facetrack.face_logger import FaceLogger
from facetrack.geometry import Point, Rect


class FakeClock:
    """Returns preset timestamps in order."""

    def __init__(self, *times):
        self.times = list(times)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.times.pop(0)


@pytest.fixture
def face_logger():
    return FaceLogger(TrackerConfig(colors=ColorConfig(seed=11)))


class TestClock:
    def test_clock_read_once_per_cycle(self):
        clock = FakeClock(0.0, 40.0)
        fl = FaceLogger(clock=clock)

        fl.tick([Rect(10, 10, 20, 20)])
        fl.tick([Rect(12, 11, 20, 20)])

        assert clock.calls == 2
        assert fl.cycle_time == 40.0
        (track,) = fl.tracks
        assert track.created_at == 0.0
        assert track.last_matched_at == 40.0

    def test_explicit_timestamp_skips_clock(self):
        clock = FakeClock()
        fl = FaceLogger(clock=clock)
        fl.tick([], timestamp=5.0)
        assert clock.calls == 0

    def test_out_of_order_timestamp_rejected(self, face_logger):
        face_logger.tick([], timestamp=100.0)
        with pytest.raises(ValueError):
            face_logger.tick([], timestamp=50.0)

    def test_none_detections_treated_as_empty(self, face_logger):
        result = face_logger.tick(None, timestamp=0.0)
        assert result.num_detections == 0


class TestQueries:
    def test_new_face_is_not_reported(self, face_logger):
        face_logger.tick([Rect(10, 10, 20, 20)], timestamp=0.0)

        assert len(face_logger.tracks) == 1
        assert face_logger.reportable_tracks() == []
        assert face_logger.face_sizes() == {}
        assert face_logger.face_positions() == {}
        assert face_logger.face_movements() == {}
        assert face_logger.count_faces() == 0

    def test_confirmed_face_is_reported(self, face_logger):
        face_logger.tick([Rect(10, 10, 20, 20)], timestamp=0.0)
        face_logger.tick([Rect(12, 11, 20, 20)], timestamp=1.0)

        (track,) = face_logger.tracks
        assert face_logger.face_sizes() == {track.color: 400.0}
        assert face_logger.face_positions() == {track.color: Point(22.0, 21.0)}
        assert face_logger.face_movements() == {track.color: Point(2.0, 1.0)}
        assert face_logger.count_faces() == 1

    def test_accepts_numpy_detections(self, face_logger):
        face_logger.tick(np.array([[100, 100, 80, 80]]), timestamp=0.0)
        face_logger.tick(np.array([[102, 100, 80, 80]]), timestamp=30.0)
        assert len(face_logger.reportable_tracks()) == 1

    def test_veteran_counted_after_dropout(self, face_logger):
        face = Rect(100, 100, 100, 100)
        for t in range(0, 3300, 100):
            face_logger.tick([face], timestamp=float(t))
        assert face_logger.count_faces() == 1

        face_logger.tick([], timestamp=4000.0)
        assert face_logger.count_faces() == 1
        assert len(face_logger.face_positions()) == 1

        face_logger.tick([], timestamp=4800.0)
        assert face_logger.count_faces() == 0
        assert face_logger.face_positions() == {}
        assert len(face_logger.tracks) == 1

        result = face_logger.tick([], timestamp=5300.0)
        assert len(result.expired) == 1
        assert face_logger.tracks == []

    def test_young_face_not_counted_after_dropout(self, face_logger):
        face = Rect(100, 100, 100, 100)
        for t in (0.0, 100.0, 200.0):
            face_logger.tick([face], timestamp=t)
        face_logger.tick([], timestamp=300.0)

        assert face_logger.count_faces() == 0
        assert len(face_logger.face_positions()) == 1

    def test_statistics(self, face_logger):
        face_logger.tick([Rect(0, 0, 100, 100), Rect(300, 0, 100, 100)], timestamp=0.0)
        face_logger.tick([Rect(0, 0, 100, 100)], timestamp=10.0)

        stats = face_logger.get_statistics()
        assert stats == {
            "total_tracks": 2,
            "active_tracks": 1,
            "reportable_tracks": 1,
            "face_count": 1,
            "cycle_count": 2,
        }

    def test_log_tracks_emits_debug(self, face_logger, caplog):
        face_logger.tick([Rect(0, 0, 100, 100)], timestamp=0.0)
        with caplog.at_level("DEBUG", logger="facetrack.face_logger"):
            face_logger.log_tracks()
        assert "track 1" in caplog.text

    def test_reset(self, face_logger):
        face_logger.tick([Rect(0, 0, 100, 100)], timestamp=50.0)
        face_logger.reset()
        assert face_logger.tracks == []
        face_logger.tick([], timestamp=0.0)


class TestMarkFaces:
    def test_draws_reportable_faces_in_identity_color(self, face_logger):
        face_logger.tick([Rect(10, 10, 20, 20)], timestamp=0.0)
        face_logger.tick([Rect(12, 11, 20, 20)], timestamp=1.0)
        image = np.zeros((100, 100, 3), dtype=np.uint8)

        out = face_logger.mark_faces(image)

        (track,) = face_logger.tracks
        assert out is image
        assert tuple(int(c) for c in image[11, 12]) == track.color.to_bgr()
        assert tuple(int(c) for c in image[31, 32]) == track.color.to_bgr()
        assert image[20, 20].sum() == 0

    def test_hidden_faces_not_drawn(self, face_logger):
        face_logger.tick([Rect(10, 10, 20, 20)], timestamp=0.0)
        image = np.zeros((100, 100, 3), dtype=np.uint8)

        face_logger.mark_faces(image)

        assert image.sum() == 0
