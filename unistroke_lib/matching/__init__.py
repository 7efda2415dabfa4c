"""Elastic matching against the reference set.

The module exports:
    ElasticMatcher: Normalizes a stroke and scores it against every
        reference stroke.
    AccumulationMode: Per-step or single truncation of the running score.
    MatchResult: Winning digit, its score, and all scores.
    compute_score: Score between two equal-length strokes.
    best_index: Lowest-score index with lowest-index tie breaking.
"""

from .matcher import (
    AccumulationMode,
    ElasticMatcher,
    MatchResult,
    best_index,
    compute_score,
    point_distances,
)

__all__ = [
    'ElasticMatcher', 'AccumulationMode', 'MatchResult',
    'compute_score', 'best_index', 'point_distances',
]
