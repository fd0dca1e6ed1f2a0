"""
Unit Tests for the Distance Metric
==================================

Tests position scaling, area and staleness terms, and threshold checks.
"""

import math

import pytest

from facetrack.config import DistanceConfig
from facetrack.distance import DistanceMetric
from facetrack.geometry import Rect
from facetrack.types import Color, Track


def make_track(rect, last_matched_at=0.0):
    return Track(
        track_id=1,
        current_rect=rect,
        created_at=0.0,
        last_matched_at=last_matched_at,
        color=Color(255, 0, 0),
    )


class TestDistanceMetric:
    """Test DistanceMetric.distance"""

    def test_identical_rect_same_cycle_is_zero(self):
        metric = DistanceMetric(DistanceConfig())
        track = make_track(Rect(10, 10, 20, 20))
        assert metric.distance(Rect(10, 10, 20, 20), track, cycle_time=0.0) == 0.0

    def test_small_face_shift_is_scaled_up(self):
        # area 400 / 10000 -> positional offsets divided by 0.04
        metric = DistanceMetric(DistanceConfig())
        track = make_track(Rect(10, 10, 20, 20))
        d = metric.distance(Rect(12, 11, 20, 20), track, cycle_time=1.0)
        assert d == pytest.approx(math.sqrt(50 ** 2 + 25 ** 2 + 0.1 ** 2))

    def test_size_factor_disabled_uses_pixels(self):
        metric = DistanceMetric(DistanceConfig(use_size_factor=False))
        track = make_track(Rect(10, 10, 20, 20))
        d = metric.distance(Rect(12, 11, 20, 20), track, cycle_time=1.0)
        assert d == pytest.approx(math.sqrt(4 + 1 + 0.01))

    def test_area_term(self):
        # same centroid (50, 50), area 11000 vs 10000
        metric = DistanceMetric(DistanceConfig())
        track = make_track(Rect(0, 0, 100, 100))
        d = metric.distance(Rect(-5, 0, 110, 100), track, cycle_time=0.0)
        assert d == pytest.approx(2.0)

    def test_staleness_term(self):
        metric = DistanceMetric(DistanceConfig(time_weight=0.1))
        track = make_track(Rect(0, 0, 100, 100), last_matched_at=0.0)
        assert metric.distance(Rect(0, 0, 100, 100), track, cycle_time=500.0) == pytest.approx(50.0)

    def test_not_symmetric(self):
        metric = DistanceMetric(DistanceConfig())
        a = Rect(0, 0, 100, 100)
        b = Rect(10, 0, 200, 200)
        d_ab = metric.distance(a, make_track(b), cycle_time=0.0)
        d_ba = metric.distance(b, make_track(a), cycle_time=0.0)
        assert d_ab == pytest.approx(math.sqrt(9700))
        assert d_ba == pytest.approx(math.sqrt(3981.25))

    def test_zero_area_detection_is_infinitely_far(self):
        metric = DistanceMetric(DistanceConfig())
        track = make_track(Rect(10, 10, 0, 0))
        assert math.isinf(metric.distance(Rect(10, 10, 0, 0), track, cycle_time=0.0))

    def test_zero_area_without_size_factor_is_finite(self):
        metric = DistanceMetric(DistanceConfig(use_size_factor=False))
        track = make_track(Rect(10, 10, 20, 20))
        assert metric.distance(Rect(20, 20, 0, 0), track, cycle_time=0.0) == pytest.approx(0.8)


class TestThreshold:
    """Test DistanceMetric.is_within_threshold"""

    def test_strictly_below_threshold(self):
        metric = DistanceMetric(DistanceConfig(distance_threshold=200.0))
        assert metric.is_within_threshold(199.9)
        assert not metric.is_within_threshold(200.0)
        assert not metric.is_within_threshold(500.0)

    def test_allow_all_distances(self):
        metric = DistanceMetric(DistanceConfig(allow_all_distances=True))
        assert metric.is_within_threshold(1e9)
        assert metric.is_within_threshold(math.inf)
