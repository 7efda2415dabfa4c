"""Utility functions for unistroke recognition.

Rendering utilities:
    render_strokes: Draw strokes in the canonical frame onto an image.
    render_match: Draw a user stroke over its matched reference.
    stroke_mask: Rasterize a stroke into a boolean mask.
"""

from .rendering import render_match, render_strokes, stroke_mask

__all__ = ['render_strokes', 'render_match', 'stroke_mask']
