"""Bounded point buffer for the stroke being captured.

A StrokeBuffer holds the points of one unistroke in input order. It never
grows past its capacity: ``append`` reports overflow through its return
value, and ``insert`` (used while resampling) raises StrokeFullError.

Example usage:
    Capturing and inspecting a stroke::

        from unistroke_lib.domain.stroke import StrokeBuffer
        from unistroke_lib.domain.geometry import Point

        buf = StrokeBuffer()
        buf.append(Point(10, 20))
        buf.append(Point(15, 40))
        print(len(buf), buf.point_at(1))
        buf.reset()
"""

from __future__ import annotations
import logging
from typing import Iterable, Iterator, Tuple

import numpy as np

from .. import config
from ..errors import EmptyStrokeError, PointIndexError, StrokeFullError
from .geometry import BBox, Point

_logger = logging.getLogger(__name__)


class StrokeBuffer:
    """Mutable, capacity-bounded ordered sequence of points.

    Attributes:
        capacity: Maximum number of points the buffer will hold.
    """

    def __init__(self, capacity: int = config.STROKE_SIZE):
        if capacity < 1:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._points: list[Point] = []

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(tuple(self._points))

    def __repr__(self) -> str:
        return f"StrokeBuffer({len(self._points)}/{self.capacity} points)"

    def length(self) -> int:
        """Number of points currently held."""
        return len(self._points)

    @property
    def is_full(self) -> bool:
        return len(self._points) >= self.capacity

    def append(self, point: Point) -> bool:
        """Add a point at the end of the stroke.

        Args:
            point: Point to add.

        Returns:
            True if the point was stored, False if the buffer was already
            full and the point was not stored.
        """
        if self.is_full:
            _logger.debug("Stroke full (%d points), rejecting %s", self.capacity, point)
            return False
        self._points.append(point)
        return True

    def insert(self, index: int, point: Point) -> None:
        """Insert a point before ``index``, shifting later points right.

        Raises:
            StrokeFullError: If the buffer is at capacity.
            PointIndexError: If ``index`` is outside ``[0, length]``.
        """
        if self.is_full:
            raise StrokeFullError(self.capacity)
        if not 0 <= index <= len(self._points):
            raise PointIndexError(index, len(self._points))
        self._points.insert(index, point)

    def reset(self) -> None:
        """Discard all points."""
        self._points.clear()

    def point_at(self, index: int) -> Point:
        """Return the point at ``index``.

        Negative indices are rejected rather than counted from the end.

        Raises:
            PointIndexError: If ``index`` is outside ``[0, length)``.
        """
        if not 0 <= index < len(self._points):
            raise PointIndexError(index, len(self._points))
        return self._points[index]

    def points(self) -> Tuple[Point, ...]:
        """Snapshot of the current points."""
        return tuple(self._points)

    def replace_points(self, points: Iterable[Point]) -> None:
        """Overwrite the whole stroke with ``points``.

        Raises:
            StrokeFullError: If more than ``capacity`` points are given.
        """
        new_points = list(points)
        if len(new_points) > self.capacity:
            raise StrokeFullError(self.capacity)
        self._points = new_points

    def bbox(self) -> BBox:
        """Bounding box of the current points.

        Raises:
            EmptyStrokeError: If the buffer holds no points.
        """
        if not self._points:
            raise EmptyStrokeError("Bounding box of an empty stroke is undefined")
        return BBox.from_points(self._points)

    def to_array(self) -> np.ndarray:
        """Current points as an ``(n, 2)`` int64 array."""
        if not self._points:
            return np.empty((0, 2), dtype=np.int64)
        return np.array([p.to_tuple() for p in self._points], dtype=np.int64)
