"""Recognizer facade for capture-and-match sessions.

This module provides the Recognizer class, which owns the stroke being
captured and a read-only reference set. It is the surface a pen-input
front end talks to: points are added while the pen moves, ``find_match``
is called when the pen lifts, and ``reset`` starts the next stroke.

Session states:
    Empty -> Capturing (add_point*) -> Normalized + Scored (find_match)
    reset() returns to Empty from any state.

``find_match`` normalizes the captured stroke in place. Calling it again
without a reset re-normalizes the canonical stroke. That is a no-op only
when the first scale left the longer side at exactly 250; when truncation
left it at 249 (for example a longer side of 19, 38 or 61 units), the
second pass scales it up again and moves points.

A stroke with fewer than two points is rejected before normalization
starts, so a failed ``find_match`` leaves the captured points as they were.

A Recognizer is not thread safe. Use one instance per capture session;
instances can share a TemplateSet.

Example usage:
    Recognizing a stroke::

        from unistroke_lib.api import Recognizer

        recognizer = Recognizer.from_file('strokedata.txt')
        for x, y in pen_samples:
            recognizer.add_point((x, y))
        digit = recognizer.find_match()
        recognizer.reset()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple, Union

from .. import config
from ..domain.geometry import Point
from ..domain.stroke import StrokeBuffer
from ..matching.matcher import AccumulationMode, ElasticMatcher, MatchResult
from ..templates.loader import load_template_file
from ..templates.repository import TemplateSet

_logger = logging.getLogger(__name__)


class Recognizer:
    """Unistroke digit recognizer.

    Attributes:
        templates: Reference set shared read-only with the matcher.
        matcher: ElasticMatcher that normalizes and scores the stroke.

    Example:
        >>> recognizer = Recognizer(templates)
        >>> recognizer.add_point(Point(0, 0))
        True
        >>> recognizer.num_points()
        1
    """

    def __init__(
        self,
        templates: TemplateSet,
        mode: Union[AccumulationMode, str] = config.DEFAULT_ACCUMULATION,
    ):
        """Initialize the recognizer.

        Args:
            templates: Fully loaded reference set.
            mode: Score accumulation mode (``'each-step'`` or ``'once'``).

        Raises:
            TypeError: If ``templates`` is not a TemplateSet.
        """
        if not isinstance(templates, TemplateSet):
            raise TypeError(
                f"Recognizer needs a TemplateSet, got {type(templates).__name__}"
            )
        self.templates = templates
        self.matcher = ElasticMatcher(templates, mode)
        self._stroke = StrokeBuffer(capacity=templates.stroke_size)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path] = config.DEFAULT_TEMPLATE_PATH,
        mode: Union[AccumulationMode, str] = config.DEFAULT_ACCUMULATION,
    ) -> Recognizer:
        """Create a recognizer from a reference data file.

        Raises:
            TemplateLoadError: If the file is missing or incomplete.
        """
        return cls(load_template_file(path), mode)

    # -- capture ----------------------------------------------------------

    def add_point(self, point: Union[Point, Tuple[int, int]]) -> bool:
        """Append a point to the current stroke.

        Args:
            point: Point or ``(x, y)`` pair.

        Returns:
            True if stored, False if the stroke was already full.
        """
        if not isinstance(point, Point):
            point = Point.from_tuple(point)
        stored = self._stroke.append(point)
        if not stored:
            _logger.warning("Stroke already holds %d points; dropped %s",
                            self._stroke.capacity, point)
        return stored

    def reset(self) -> None:
        """Clear the current stroke."""
        self._stroke.reset()

    def num_points(self) -> int:
        """Number of points in the current stroke."""
        return len(self._stroke)

    def point_at(self, index: int) -> Point:
        """Point ``index`` of the current stroke.

        Raises:
            PointIndexError: If ``index`` is outside ``[0, num_points())``.
        """
        return self._stroke.point_at(index)

    def point_x(self, index: int) -> int:
        """x coordinate of point ``index``; raises PointIndexError if out of range."""
        return self._stroke.point_at(index).x

    def point_y(self, index: int) -> int:
        """y coordinate of point ``index``; raises PointIndexError if out of range."""
        return self._stroke.point_at(index).y

    @property
    def stroke(self) -> StrokeBuffer:
        """The buffer holding the current stroke."""
        return self._stroke

    # -- matching ---------------------------------------------------------

    def match(self) -> MatchResult:
        """Normalize the current stroke and match it.

        Raises:
            EmptyStrokeError: If no points were captured.
            InsufficientPointsError: If only one point was captured.
        """
        result = self.matcher.match(self._stroke)
        _logger.info("Recognized digit %d (score %d)", result.digit, result.score)
        return result

    def find_match(self) -> int:
        """Normalize the current stroke and return the recognized digit."""
        return self.match().digit

    def compute_score(self, index: int) -> int:
        """Score the current (normalized) stroke against reference ``index``.

        Raises:
            ValueError: If the stroke has not been normalized to the
                reference length.
            IndexError: If ``index`` is not a valid digit class.
        """
        return self.matcher.score_against(self._stroke, index)

    def scores(self) -> List[int]:
        """Scores of the current (normalized) stroke against every reference."""
        return self.matcher.score_all(self._stroke)
