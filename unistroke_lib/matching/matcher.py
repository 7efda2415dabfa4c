"""Elastic matching of a normalized stroke against the reference set.

The score between two strokes of equal length is the sum of the distances
between points at the same index. The lowest score over all reference
strokes picks the recognized digit; equal scores resolve to the lower
index.

Two accumulation modes are supported:
    AccumulationMode.TRUNCATE_EACH_STEP: the running total is truncated to
        an integer after every addition. This reproduces the scores of the
        original recognizer exactly and is the default.
    AccumulationMode.TRUNCATE_ONCE: distances are summed in full precision
        and the total is truncated once.

The two modes can disagree by up to one unit per point, so they may rank
close references differently.

Example usage:
    Matching a captured stroke::

        from unistroke_lib.matching import ElasticMatcher
        from unistroke_lib.templates import load_template_file

        matcher = ElasticMatcher(load_template_file('strokedata.txt'))
        result = matcher.match(buffer)
        print(result.digit, result.score)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

import numpy as np

from .. import config
from ..domain.stroke import StrokeBuffer
from ..processing.normalize import Normalizer
from ..templates.repository import TemplateSet

_logger = logging.getLogger(__name__)


class AccumulationMode(Enum):
    """How point distances are accumulated into a score.

    Example:
        >>> AccumulationMode.from_name('once')
        <AccumulationMode.TRUNCATE_ONCE: 'once'>
    """
    TRUNCATE_EACH_STEP = 'each-step'
    TRUNCATE_ONCE = 'once'

    @classmethod
    def from_name(cls, name: str) -> AccumulationMode:
        """Look up a mode by its value, e.g. ``'each-step'``."""
        try:
            return cls(name)
        except ValueError:
            choices = ', '.join(m.value for m in cls)
            raise ValueError(f"Unknown accumulation mode {name!r} (choose from {choices})") from None


@dataclass
class MatchResult:
    """Outcome of matching one stroke against the reference set.

    Attributes:
        digit: Index of the best reference stroke.
        score: Score of the best reference stroke.
        scores: Score against every reference stroke, by index.
    """
    digit: int
    score: int
    scores: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {'digit': self.digit, 'score': self.score, 'scores': list(self.scores)}


def _as_array(stroke) -> np.ndarray:
    if isinstance(stroke, StrokeBuffer):
        return stroke.to_array()
    if isinstance(stroke, np.ndarray):
        return stroke
    return np.array([(p.x, p.y) if hasattr(p, 'x') else tuple(p) for p in stroke],
                    dtype=np.int64).reshape(-1, 2)


def point_distances(stroke, reference) -> np.ndarray:
    """Distance between the points of two strokes at each index.

    Raises:
        ValueError: If the strokes have different lengths.
    """
    a = _as_array(stroke).astype(np.float64)
    b = _as_array(reference).astype(np.float64)
    if a.shape != b.shape:
        raise ValueError(
            f"Cannot score strokes of different lengths ({len(a)} vs {len(b)})"
        )
    d = a - b
    return np.sqrt(d[:, 0] * d[:, 0] + d[:, 1] * d[:, 1])


def compute_score(
    stroke,
    reference,
    mode: AccumulationMode = AccumulationMode.TRUNCATE_EACH_STEP,
) -> int:
    """Elastic matching score between a stroke and a reference stroke.

    Args:
        stroke: Normalized user stroke (StrokeBuffer, ``(n, 2)`` array, or
            sequence of Points).
        reference: Reference stroke of the same length.
        mode: Accumulation mode.

    Returns:
        Integer score; 0 for identical strokes.

    Raises:
        ValueError: If the strokes have different lengths.
    """
    distances = point_distances(stroke, reference)
    if mode is AccumulationMode.TRUNCATE_ONCE:
        return int(math.fsum(distances.tolist()))

    score = 0
    for distance in distances.tolist():
        score = int(score + distance)
    return score


def best_index(scores: Sequence[int]) -> int:
    """Index of the strictly smallest score, lowest index on ties.

    Raises:
        ValueError: If ``scores`` is empty.
    """
    if not scores:
        raise ValueError("No scores to choose from")
    min_index = 0
    for i in range(1, len(scores)):
        if scores[i] < scores[min_index]:
            min_index = i
    return min_index


class ElasticMatcher:
    """Scores strokes against a fixed reference set.

    The matcher normalizes a StrokeBuffer in place before scoring it, so
    the buffer holds the canonical stroke afterwards.

    Attributes:
        templates: Read-only reference set.
        mode: Accumulation mode used for every score.
        normalizer: Normalizer applied by ``match``.
    """

    def __init__(
        self,
        templates: TemplateSet,
        mode: AccumulationMode | str = config.DEFAULT_ACCUMULATION,
        normalizer: Normalizer | None = None,
    ):
        if isinstance(mode, str):
            mode = AccumulationMode.from_name(mode)
        self.templates = templates
        self.mode = mode
        self.normalizer = normalizer or Normalizer(target_size=templates.stroke_size)

    def score_against(self, stroke, index: int) -> int:
        """Score ``stroke`` against reference ``index``."""
        return compute_score(stroke, self.templates.array(index), self.mode)

    def score_all(self, stroke) -> List[int]:
        """Score ``stroke`` against every reference stroke, by index."""
        a = _as_array(stroke)
        return [self.score_against(a, i) for i in range(len(self.templates))]

    def match(self, buffer: StrokeBuffer) -> MatchResult:
        """Normalize ``buffer`` in place and pick the best reference.

        Raises:
            EmptyStrokeError: If the buffer is empty.
            InsufficientPointsError: If the buffer holds a single point.
        """
        self.normalizer.normalize(buffer)
        scores = self.score_all(buffer)
        digit = best_index(scores)
        _logger.debug("Match scores %s -> digit %d", scores, digit)
        return MatchResult(digit=digit, score=scores[digit], scores=scores)

    def find_match(self, buffer: StrokeBuffer) -> int:
        """Normalize ``buffer`` and return the best reference index."""
        return self.match(buffer).digit
