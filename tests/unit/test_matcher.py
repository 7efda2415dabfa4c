"""Unit tests for unistroke_lib.matching.matcher.

Tests the elastic matching score and best-match selection:
    - compute_score: zero self-distance, per-step vs single truncation
    - best_index: strict improvement, lowest index on ties
    - ElasticMatcher: normalization plus scoring against a TemplateSet
"""

import unittest

import numpy as np

from factories import line_stroke, line_strokes, line_templates
from unistroke_lib.domain.geometry import Point
from unistroke_lib.domain.stroke import StrokeBuffer
from unistroke_lib.errors import InsufficientPointsError
from unistroke_lib.matching.matcher import (
    AccumulationMode,
    ElasticMatcher,
    MatchResult,
    best_index,
    compute_score,
    point_distances,
)
from unistroke_lib.templates.repository import TemplateSet


def buffer_of(points) -> StrokeBuffer:
    buffer = StrokeBuffer()
    for p in points:
        buffer.append(p)
    return buffer


class TestComputeScore(unittest.TestCase):

    def test_self_distance_is_zero(self):
        """A stroke scores 0 against itself in both modes."""
        stroke = line_stroke(60)
        self.assertEqual(compute_score(stroke, stroke), 0)
        self.assertEqual(compute_score(stroke, stroke, AccumulationMode.TRUNCATE_ONCE), 0)

    def test_integer_distances_sum_exactly(self):
        """Integer distances add up with no loss."""
        a = [Point(0, 0), Point(0, 0)]
        b = [Point(3, 4), Point(6, 8)]
        self.assertEqual(compute_score(a, b), 15)

    def test_truncates_after_each_step(self):
        """Per-step truncation drops each fraction; single truncation keeps them."""
        # three distances of sqrt(2): 1, 2, 3 step by step vs int(4.24) at the end
        a = [Point(0, 0)] * 3
        b = [Point(1, 1)] * 3
        self.assertEqual(compute_score(a, b, AccumulationMode.TRUNCATE_EACH_STEP), 3)
        self.assertEqual(compute_score(a, b, AccumulationMode.TRUNCATE_ONCE), 4)

    def test_default_mode_is_each_step(self):
        """Per-step truncation is the default."""
        a = [Point(0, 0)] * 3
        b = [Point(1, 1)] * 3
        self.assertEqual(compute_score(a, b), 3)

    def test_length_mismatch_raises(self):
        """Strokes of different lengths cannot be scored."""
        with self.assertRaises(ValueError):
            compute_score(line_stroke(0), line_stroke(0, n_points=149))

    def test_accepts_arrays_and_buffers(self):
        """Buffers and arrays score like point lists."""
        stroke = line_stroke(40)
        array = np.array([p.to_tuple() for p in stroke])
        self.assertEqual(compute_score(buffer_of(stroke), array), 0)

    def test_point_distances(self):
        """Per-index Euclidean distances."""
        np.testing.assert_allclose(
            point_distances([Point(0, 0), Point(1, 1)], [Point(3, 4), Point(1, 1)]),
            [5.0, 0.0],
        )


class TestBestIndex(unittest.TestCase):

    def test_smallest_wins(self):
        """The smallest score wins."""
        self.assertEqual(best_index([9, 4, 7, 2, 8]), 3)

    def test_tie_goes_to_lowest_index(self):
        """Equal scores resolve to the first index."""
        self.assertEqual(best_index([5, 3, 8, 3, 3]), 1)

    def test_first_index_when_all_equal(self):
        """All equal scores give index 0."""
        self.assertEqual(best_index([0] * 10), 0)

    def test_empty_raises(self):
        """No scores, no winner."""
        with self.assertRaises(ValueError):
            best_index([])


class TestAccumulationMode(unittest.TestCase):

    def test_from_name(self):
        """Mode names map to their members."""
        self.assertIs(AccumulationMode.from_name('each-step'), AccumulationMode.TRUNCATE_EACH_STEP)
        self.assertIs(AccumulationMode.from_name('once'), AccumulationMode.TRUNCATE_ONCE)

    def test_unknown_name(self):
        """Unknown mode names raise ValueError."""
        with self.assertRaises(ValueError):
            AccumulationMode.from_name('round')

    def test_matcher_accepts_name(self):
        """ElasticMatcher takes a mode name."""
        matcher = ElasticMatcher(line_templates(), mode='once')
        self.assertIs(matcher.mode, AccumulationMode.TRUNCATE_ONCE)


class TestElasticMatcher(unittest.TestCase):

    def setUp(self):
        self.templates = line_templates()
        self.matcher = ElasticMatcher(self.templates)

    def test_exact_reference_matches_itself(self):
        """A verbatim reference matches itself with score 0."""
        result = self.matcher.match(buffer_of(line_stroke(60)))
        self.assertIsInstance(result, MatchResult)
        self.assertEqual(result.digit, 3)
        self.assertEqual(result.score, 0)
        self.assertEqual(len(result.scores), 10)
        self.assertTrue(all(s > 0 for i, s in enumerate(result.scores) if i != 3))

    def test_scores_against_vertical_line(self):
        """Scores against line references are exact integer sums."""
        # distances are the integer x offsets, so the score is exact
        scores = self.matcher.score_all(line_stroke(0))
        expected = [sum(20 * k * i // 149 for i in range(150)) for k in range(10)]
        self.assertEqual(scores, expected)
        self.assertEqual(scores, sorted(scores))

    def test_tie_returns_lower_index(self):
        """Duplicate references resolve to the lower digit."""
        strokes = line_strokes()
        strokes[5] = list(strokes[2])
        matcher = ElasticMatcher(TemplateSet.from_strokes(strokes))
        self.assertEqual(matcher.find_match(buffer_of(line_stroke(40))), 2)

    def test_match_normalizes_buffer(self):
        """match leaves the buffer in the canonical frame."""
        buffer = buffer_of([Point(10, 10), Point(10, 60)])
        self.matcher.match(buffer)
        self.assertEqual(len(buffer), 150)
        self.assertEqual(buffer.point_at(149), Point(0, 250))

    def test_rejected_stroke_not_normalized(self):
        """A one-point buffer is rejected with its point unchanged."""
        buffer = buffer_of([Point(17, 23)])
        with self.assertRaises(InsufficientPointsError):
            self.matcher.match(buffer)
        self.assertEqual(buffer.points(), (Point(17, 23),))

    def test_score_against_bad_index(self):
        """Reference index 10 is out of range."""
        with self.assertRaises(IndexError):
            self.matcher.score_against(line_stroke(0), 10)

    def test_to_dict(self):
        """MatchResult serializes to a plain dict."""
        result = MatchResult(digit=1, score=7, scores=[9, 7])
        self.assertEqual(result.to_dict(), {'digit': 1, 'score': 7, 'scores': [9, 7]})


if __name__ == '__main__':
    unittest.main()
