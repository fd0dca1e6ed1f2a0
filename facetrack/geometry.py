"""
Rectangle Geometry
==================

Axis-aligned rectangles and points used across the tracker.

Rectangles are stored as ``(x, y, width, height)``, the layout face
detectors such as OpenCV's cascade classifier report.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

Number = Union[float, int]


@dataclass(frozen=True)
class Point:
    """2D point or displacement vector."""
    x: float
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle [x, y, width, height]"""
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def to_list(self) -> List[float]:
        """Convert to [x, y, width, height] list"""
        return [self.x, self.y, self.width, self.height]

    def to_corners(self) -> Tuple[int, int, int, int]:
        """Integer [x1, y1, x2, y2] corners for drawing."""
        return (
            int(round(self.x)),
            int(round(self.y)),
            int(round(self.x + self.width)),
            int(round(self.y + self.height)),
        )

    @staticmethod
    def from_list(values: Sequence[Number]) -> "Rect":
        """Create from [x, y, width, height] list"""
        if len(values) != 4:
            raise ValueError(f"rect needs 4 values (x, y, width, height), got {len(values)}")
        return Rect(float(values[0]), float(values[1]), float(values[2]), float(values[3]))


RectLike = Union[Rect, Sequence[Number]]


def as_rect(value: RectLike) -> Rect:
    if isinstance(value, Rect):
        return value
    return Rect.from_list(value)


def centroid(rect: Rect) -> Point:
    return Point(rect.x + rect.width / 2.0, rect.y + rect.height / 2.0)


def calculate_distance(point_a: Point, point_b: Point) -> float:
    return math.hypot(point_a.x - point_b.x, point_a.y - point_b.y)
