"""Reading and writing the reference data file.

The file is plain text with one integer per line and no header. Lines are
grouped by reference stroke 0..9; each group holds the points of that
stroke in order, written as alternating x and y lines::

    x0 of stroke 0
    y0 of stroke 0
    x1 of stroke 0
    ...
    y149 of stroke 9

A complete file therefore has ``10 * 150 * 2 = 3000`` lines. Anything
shorter, longer, or non-numeric is rejected with TemplateLoadError.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import numpy as np

from .. import config
from ..errors import TemplateLoadError
from .repository import TemplateSet

_logger = logging.getLogger(__name__)


def parse_template_lines(
    lines: Iterable[str],
    num_strokes: int = config.NUM_STROKES,
    stroke_size: int = config.STROKE_SIZE,
    source: str = '<lines>',
) -> TemplateSet:
    """Parse reference data lines into a TemplateSet.

    Trailing blank lines are ignored; blank lines anywhere else are an
    error.

    Args:
        lines: Text lines, with or without line terminators.
        num_strokes: Expected number of reference strokes.
        stroke_size: Expected number of points per stroke.
        source: Name used in error messages.

    Returns:
        Validated TemplateSet.

    Raises:
        TemplateLoadError: If a line is not an integer or the line count
            does not match ``num_strokes * stroke_size * 2``.
    """
    values: List[int] = []
    stripped = [line.strip() for line in lines]
    while stripped and not stripped[-1]:
        stripped.pop()

    for lineno, text in enumerate(stripped, start=1):
        try:
            values.append(int(text))
        except ValueError:
            raise TemplateLoadError(
                f"{source}:{lineno}: expected an integer, got {text!r}"
            ) from None

    expected = num_strokes * stroke_size * 2
    if len(values) != expected:
        raise TemplateLoadError(
            f"{source}: expected {expected} lines "
            f"({num_strokes} strokes x {stroke_size} points x 2), got {len(values)}"
        )

    data = np.array(values, dtype=np.int64).reshape(num_strokes, stroke_size, 2)
    return TemplateSet(data, num_strokes, stroke_size)


def load_template_file(
    path: str | Path = config.DEFAULT_TEMPLATE_PATH,
    num_strokes: int = config.NUM_STROKES,
    stroke_size: int = config.STROKE_SIZE,
) -> TemplateSet:
    """Load the reference set from a data file.

    Raises:
        TemplateLoadError: If the file cannot be read or is malformed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as e:
        raise TemplateLoadError(f"Cannot read reference data {path}: {e}") from e

    templates = parse_template_lines(
        text.splitlines(), num_strokes, stroke_size, source=str(path)
    )
    _logger.info("Loaded %d reference strokes of %d points from %s",
                 num_strokes, stroke_size, path)
    return templates


def save_template_file(templates: TemplateSet, path: str | Path) -> Path:
    """Write ``templates`` in the reference data format.

    Returns:
        The path written.
    """
    path = Path(path)
    flat = templates.to_array().reshape(-1)
    path.write_text(''.join(f"{int(v)}\n" for v in flat), encoding='utf-8')
    _logger.debug("Wrote %d reference strokes to %s", len(templates), path)
    return path
