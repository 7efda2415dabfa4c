"""Stroke normalization into the canonical frame.

A raw stroke is brought into the frame shared with the reference strokes
in three steps, always in this order:

    1. translate: slide the stroke so its minimum x and y are both 0.
    2. scale: stretch it uniformly so the longer bounding-box side is
       ``CANVAS_EXTENT`` units, truncating coordinates toward zero.
    3. resample: insert midpoints into the longest segments until the
       stroke has exactly ``STROKE_SIZE`` points.

The point-sequence functions (``translate_points``, ``scale_points``,
``insert_midpoint``) are pure. The buffer functions apply them in place to
a StrokeBuffer and check the stroke preconditions first.

Example usage:
    Normalizing a captured stroke::

        from unistroke_lib.domain import Point, StrokeBuffer
        from unistroke_lib.processing.normalize import normalize

        buf = StrokeBuffer()
        buf.append(Point(40, 40))
        buf.append(Point(140, 240))
        normalize(buf)
        print(len(buf), buf.bbox().to_tuple())  # 150 (0, 0, 125, 250)
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from .. import config
from ..domain.geometry import BBox, Point
from ..domain.stroke import StrokeBuffer
from ..errors import EmptyStrokeError, InsufficientPointsError

_logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Point-sequence transforms
# ---------------------------------------------------------------------------

def translate_points(points: Sequence[Point]) -> List[Point]:
    """Shift points so the minimum x and minimum y become 0.

    Raises:
        EmptyStrokeError: If ``points`` is empty.
    """
    if not points:
        raise EmptyStrokeError("Cannot translate an empty stroke")
    origin = BBox.from_points(points).top_left
    return [p - origin for p in points]


def scale_points(points: Sequence[Point], extent: int = config.CANVAS_EXTENT) -> List[Point]:
    """Scale points uniformly so ``max(max_x, max_y)`` becomes ``extent``.

    The points are expected to be translated already, so the maxima are
    the bounding-box width and height. Aspect ratio is preserved; the
    shorter side ends up at or below ``extent``. Coordinates are truncated
    toward zero. When both maxima are 0 the points are returned unchanged.

    Raises:
        EmptyStrokeError: If ``points`` is empty.
    """
    if not points:
        raise EmptyStrokeError("Cannot scale an empty stroke")
    longer = BBox.from_points(points).longer_side
    if longer == 0:
        return list(points)
    factor = extent / float(longer)
    return [p.scaled(factor) for p in points]


def segment_lengths(points: Sequence[Point]) -> np.ndarray:
    """Euclidean length of each segment ``(i, i+1)``."""
    xy = np.array([p.to_tuple() for p in points], dtype=np.float64)
    deltas = np.diff(xy, axis=0)
    return np.sqrt(deltas[:, 0] * deltas[:, 0] + deltas[:, 1] * deltas[:, 1])


def longest_segment_index(points: Sequence[Point]) -> int:
    """Index ``i`` of the longest segment ``(i, i+1)``.

    Ties go to the first segment in scan order.

    Raises:
        InsufficientPointsError: If fewer than two points are given.
    """
    if len(points) < 2:
        raise InsufficientPointsError(len(points))
    # argmax returns the first occurrence of the maximum
    return int(np.argmax(segment_lengths(points)))


def insert_midpoint(points: Sequence[Point]) -> List[Point]:
    """Return a copy with one midpoint inserted into the longest segment.

    Raises:
        InsufficientPointsError: If fewer than two points are given.
    """
    index = longest_segment_index(points)
    result = list(points)
    result.insert(index + 1, points[index].midpoint(points[index + 1]))
    return result


# ---------------------------------------------------------------------------
# In-place buffer operations
# ---------------------------------------------------------------------------

def translate(buffer: StrokeBuffer) -> None:
    """Translate the buffered stroke to the origin in place."""
    buffer.replace_points(translate_points(buffer.points()))


def scale(buffer: StrokeBuffer, extent: int = config.CANVAS_EXTENT) -> None:
    """Scale the buffered stroke into the canonical frame in place."""
    buffer.replace_points(scale_points(buffer.points(), extent))


def insert_one_point(buffer: StrokeBuffer) -> None:
    """Insert a midpoint into the longest segment of the buffered stroke.

    Raises:
        InsufficientPointsError: If the buffer holds fewer than two points.
        StrokeFullError: If the buffer is already at capacity.
    """
    points = buffer.points()
    index = longest_segment_index(points)
    buffer.insert(index + 1, points[index].midpoint(points[index + 1]))


def normalize_num_points(buffer: StrokeBuffer, target: int = config.STROKE_SIZE) -> None:
    """Resample the buffered stroke up to exactly ``target`` points.

    A stroke already holding ``target`` or more points is left as is.

    Raises:
        InsufficientPointsError: If the buffer holds fewer than two points.
        ValueError: If ``target`` exceeds the buffer capacity.
    """
    if target > buffer.capacity:
        raise ValueError(
            f"Target of {target} points exceeds buffer capacity {buffer.capacity}"
        )
    if len(buffer) < 2:
        raise InsufficientPointsError(len(buffer))

    inserted = 0
    while len(buffer) < target:
        insert_one_point(buffer)
        inserted += 1
    if inserted:
        _logger.debug("Resampled stroke to %d points (%d inserted)", target, inserted)


def check_normalizable(buffer: StrokeBuffer) -> None:
    """Reject a stroke that cannot be resampled, before anything is changed.

    Raises:
        EmptyStrokeError: If the buffer is empty.
        InsufficientPointsError: If the buffer holds a single point.
    """
    if len(buffer) == 0:
        raise EmptyStrokeError("Cannot normalize an empty stroke")
    if len(buffer) < 2:
        raise InsufficientPointsError(len(buffer))


def normalize(
    buffer: StrokeBuffer,
    extent: int = config.CANVAS_EXTENT,
    target: int = config.STROKE_SIZE,
) -> None:
    """Translate, scale and resample the buffered stroke, in that order.

    The buffer is left untouched when the stroke has fewer than two points.
    """
    check_normalizable(buffer)
    translate(buffer)
    scale(buffer, extent)
    normalize_num_points(buffer, target)


class Normalizer:
    """Normalization pipeline bound to a canvas extent and point count.

    Attributes:
        extent: Longer bounding-box side after scaling.
        target_size: Point count after resampling.

    Example:
        >>> normalizer = Normalizer()
        >>> normalizer.normalize(buffer)
    """

    def __init__(self, extent: int = config.CANVAS_EXTENT,
                 target_size: int = config.STROKE_SIZE):
        self.extent = extent
        self.target_size = target_size

    def translate(self, buffer: StrokeBuffer) -> None:
        translate(buffer)

    def scale(self, buffer: StrokeBuffer) -> None:
        scale(buffer, self.extent)

    def resample(self, buffer: StrokeBuffer) -> None:
        normalize_num_points(buffer, self.target_size)

    def normalize(self, buffer: StrokeBuffer) -> None:
        """Apply translate, scale and resample in order."""
        check_normalizable(buffer)
        self.translate(buffer)
        self.scale(buffer)
        self.resample(buffer)
