"""Geometric value objects for unistroke recognition."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple
import math


@dataclass(frozen=True)
class Point:
    """Immutable 2D integer point."""
    x: int
    y: int

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def midpoint(self, other: Point) -> Point:
        """Component-wise average, truncated toward zero."""
        return Point(int((self.x + other.x) / 2), int((self.y + other.y) / 2))

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> Point:
        """Multiply both coordinates by ``factor``, truncating toward zero."""
        return Point(int(self.x * factor), int(self.y * factor))

    def to_tuple(self) -> Tuple[int, int]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Tuple[int, int]) -> Point:
        """Create from tuple."""
        return cls(int(t[0]), int(t[1]))


@dataclass(frozen=True)
class BBox:
    """Immutable bounding box."""
    x_min: int
    y_min: int
    x_max: int
    y_max: int

    @property
    def width(self) -> int:
        return self.x_max - self.x_min

    @property
    def height(self) -> int:
        return self.y_max - self.y_min

    @property
    def top_left(self) -> Point:
        return Point(self.x_min, self.y_min)

    @property
    def longer_side(self) -> int:
        """Larger of ``x_max`` and ``y_max``.

        Measured from the origin, not from the minimum corner: for a
        translated stroke this is the longer bounding-box side.
        """
        return max(self.x_max, self.y_max)

    def to_tuple(self) -> Tuple[int, int, int, int]:
        """Convert to tuple for compatibility."""
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> BBox:
        """Create bounding box containing all points.

        Raises:
            ValueError: If ``points`` is empty.
        """
        points = list(points)
        if not points:
            raise ValueError("Cannot compute bounding box of no points")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))
