"""Reference stroke set used for matching.

This module provides the TemplateSet class, an immutable collection of
reference strokes indexed by digit class. Every reference stroke has the
same number of points, so a normalized user stroke can be compared to it
point by point.

The set is validated when it is constructed. A TemplateSet either holds
exactly ``num_strokes`` complete strokes or does not exist: there is no
partially loaded state for the matcher to stumble into.

Example usage:
    Building a set from point lists::

        from unistroke_lib.templates.repository import TemplateSet

        strokes = [[(x, 0) for x in range(150)] for _ in range(10)]
        templates = TemplateSet.from_strokes(strokes)

        print(len(templates))          # 10
        print(templates.stroke(3)[0])  # Point(x=0, y=0)

    Loading from the reference data file::

        from unistroke_lib.templates import load_template_file

        templates = load_template_file('strokedata.txt')
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple, Union

import numpy as np

from .. import config
from ..domain.geometry import Point
from ..errors import TemplateLoadError

PointLike = Union[Point, Tuple[int, int], Sequence[int]]


def _as_xy(point: PointLike) -> Tuple[int, int]:
    if isinstance(point, Point):
        return point.to_tuple()
    return (int(point[0]), int(point[1]))


class TemplateSet:
    """Immutable set of reference strokes.

    Points are stored in a read-only int64 array of shape
    ``(num_strokes, stroke_size, 2)``.

    Attributes:
        num_strokes: Number of reference strokes (digit classes).
        stroke_size: Number of points in each reference stroke.

    Example:
        >>> templates = TemplateSet(np.zeros((10, 150, 2), dtype=np.int64))
        >>> templates.stroke_size
        150
    """

    def __init__(
        self,
        data: np.ndarray,
        num_strokes: int = config.NUM_STROKES,
        stroke_size: int = config.STROKE_SIZE,
    ):
        """Validate and freeze reference data.

        Args:
            data: Array-like of shape ``(num_strokes, stroke_size, 2)``
                holding integer x, y coordinates.
            num_strokes: Expected number of strokes.
            stroke_size: Expected number of points per stroke.

        Raises:
            TemplateLoadError: If the data has the wrong shape or holds
                non-integer values.
        """
        try:
            raw = np.asarray(data)
        except (TypeError, ValueError) as e:
            raise TemplateLoadError(f"Reference data is not a regular array: {e}") from e
        expected = (num_strokes, stroke_size, 2)
        if raw.shape != expected:
            raise TemplateLoadError(
                f"Reference data has shape {raw.shape}, expected {expected}"
            )
        if raw.dtype.kind == 'f':
            if not np.all(np.mod(raw, 1) == 0):
                raise TemplateLoadError("Reference coordinates must be integers")
        elif raw.dtype.kind not in 'iu':
            raise TemplateLoadError(
                f"Reference coordinates must be integers, got dtype {raw.dtype}"
            )

        array = raw.astype(np.int64, copy=True)
        array.flags.writeable = False
        self._data = array
        self.num_strokes = num_strokes
        self.stroke_size = stroke_size

    def __len__(self) -> int:
        return self.num_strokes

    def __iter__(self) -> Iterator[Tuple[Point, ...]]:
        for index in range(self.num_strokes):
            yield self.stroke(index)

    def __repr__(self) -> str:
        return f"TemplateSet({self.num_strokes} strokes x {self.stroke_size} points)"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.num_strokes:
            raise IndexError(
                f"Template index {index} out of range (0..{self.num_strokes - 1})"
            )

    def stroke(self, index: int) -> Tuple[Point, ...]:
        """Reference stroke ``index`` as a tuple of Points.

        Raises:
            IndexError: If ``index`` is not a valid digit class.
        """
        self._check_index(index)
        return tuple(Point(int(x), int(y)) for x, y in self._data[index])

    def array(self, index: int) -> np.ndarray:
        """Read-only ``(stroke_size, 2)`` view of reference stroke ``index``."""
        self._check_index(index)
        return self._data[index]

    def to_array(self) -> np.ndarray:
        """Read-only view of the full reference data."""
        return self._data

    @classmethod
    def from_strokes(
        cls,
        strokes: Sequence[Sequence[PointLike]],
        num_strokes: int = config.NUM_STROKES,
        stroke_size: int = config.STROKE_SIZE,
    ) -> TemplateSet:
        """Create a set from nested point sequences.

        Args:
            strokes: One sequence of points (Point objects or ``(x, y)``
                pairs) per digit class.

        Raises:
            TemplateLoadError: If the stroke count or any stroke length is
                wrong.
        """
        if len(strokes) != num_strokes:
            raise TemplateLoadError(
                f"Expected {num_strokes} reference strokes, got {len(strokes)}"
            )
        rows = []
        for index, stroke in enumerate(strokes):
            if len(stroke) != stroke_size:
                raise TemplateLoadError(
                    f"Reference stroke {index} has {len(stroke)} points, "
                    f"expected {stroke_size}"
                )
            rows.append([_as_xy(p) for p in stroke])
        return cls(np.array(rows, dtype=np.int64), num_strokes, stroke_size)
