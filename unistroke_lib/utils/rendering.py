"""Stroke rendering utilities.

This module draws strokes in the canonical frame onto PIL images so a
recognition can be inspected by eye: the normalized user stroke on top of
the reference stroke it was matched to.

The module provides the following functions:
    render_strokes: Draw one or more strokes, each in its own color.
    render_match: Draw a user stroke over a reference stroke.
    stroke_mask: Rasterize a stroke into a boolean numpy mask.

Example usage:
    Saving a match preview::

        from unistroke_lib.utils.rendering import render_match

        image = render_match(recognizer.stroke.points(), templates.stroke(digit))
        image.save('match.png')
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from .. import config
from ..domain.geometry import Point

USER_COLOR = (30, 90, 220)
REFERENCE_COLOR = (220, 60, 60)

Color = Tuple[int, int, int]


def _canvas_xy(point: Point, scale: float, margin: int) -> Tuple[float, float]:
    return (margin + point.x * scale, margin + point.y * scale)


def render_strokes(
    strokes: Iterable[Tuple[Sequence[Point], Color]],
    canvas_size: int = 300,
    extent: int = config.CANVAS_EXTENT,
    line_width: int = 2,
) -> Image.Image:
    """Draw strokes given in canonical coordinates.

    Args:
        strokes: Pairs of (points, RGB color), drawn in order.
        canvas_size: Width and height of the output image in pixels.
        extent: Canonical frame size mapped onto the canvas.
        line_width: Polyline width in pixels.

    Returns:
        RGB image with a white background.
    """
    margin = max(2, canvas_size // 20)
    scale = (canvas_size - 2 * margin) / float(extent)
    img = Image.new('RGB', (canvas_size, canvas_size), 'white')
    draw = ImageDraw.Draw(img)

    for points, color in strokes:
        xy = [_canvas_xy(p, scale, margin) for p in points]
        if len(xy) >= 2:
            draw.line(xy, fill=color, width=line_width)
        # Mark the start so direction is visible
        if xy:
            x, y = xy[0]
            r = line_width + 1
            draw.ellipse([x - r, y - r, x + r, y + r], fill=color)
    return img


def render_match(
    user_points: Sequence[Point],
    reference_points: Optional[Sequence[Point]] = None,
    canvas_size: int = 300,
) -> Image.Image:
    """Draw the user stroke over its matched reference stroke."""
    strokes = []
    if reference_points is not None:
        strokes.append((reference_points, REFERENCE_COLOR))
    strokes.append((user_points, USER_COLOR))
    return render_strokes(strokes, canvas_size=canvas_size)


def stroke_mask(points: Sequence[Point], canvas_size: int = 64,
                extent: int = config.CANVAS_EXTENT) -> np.ndarray:
    """Rasterize a stroke into a ``(canvas_size, canvas_size)`` bool mask."""
    img = render_strokes([(points, (0, 0, 0))], canvas_size=canvas_size,
                         extent=extent, line_width=1).convert('L')
    return np.array(img) < 128
