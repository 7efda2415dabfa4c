"""Stroke normalization.

The module exports:
    Normalizer: Translate, scale and resample pipeline bound to a canvas
        extent and target point count.
    normalize: Apply the full pipeline to a StrokeBuffer in place.
    translate, scale, normalize_num_points, insert_one_point: The
        individual in-place steps.
    translate_points, scale_points, insert_midpoint: Pure versions
        operating on point sequences.
"""

from .normalize import (
    Normalizer,
    insert_midpoint,
    insert_one_point,
    longest_segment_index,
    normalize,
    normalize_num_points,
    scale,
    scale_points,
    translate,
    translate_points,
)

__all__ = [
    'Normalizer', 'normalize',
    'translate', 'scale', 'normalize_num_points', 'insert_one_point',
    'translate_points', 'scale_points', 'insert_midpoint', 'longest_segment_index',
]
