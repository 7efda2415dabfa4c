#!/usr/bin/env python3
"""Command-line interface for unistroke digit recognition.

Reads a captured stroke from a text file, matches it against the reference
set and prints the recognized digit.

The stroke file holds one point per line as ``x y`` or ``x,y``. Blank lines
and lines starting with ``#`` are ignored. At most 150 points are used;
extra points are dropped with a warning.

Usage:
    python -m unistroke_lib --stroke stroke.txt
    python -m unistroke_lib --stroke stroke.txt --templates data/strokedata.txt --json
    python -m unistroke_lib --stroke stroke.txt --accumulation once --verbose
    python -m unistroke_lib --stroke stroke.txt --render match.png

Exit codes:
    0: recognized
    1: unreadable stroke or reference data, or too few points
    2: invalid arguments
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from . import config
from .api.recognizer import Recognizer
from .domain.geometry import Point
from .errors import StrokeError, TemplateLoadError
from .matching.matcher import AccumulationMode

log = logging.getLogger('unistroke_lib')

_SEPARATOR = re.compile(r'[,\s]+')


def read_stroke_file(path: str | Path) -> List[Point]:
    """Read points from a stroke file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If a line is not a pair of integers.
    """
    points: List[Point] = []
    text = Path(path).read_text(encoding='utf-8')
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        fields = [f for f in _SEPARATOR.split(line) if f]
        if len(fields) != 2:
            raise ValueError(f"{path}:{lineno}: expected 'x y', got {line!r}")
        try:
            points.append(Point(int(fields[0]), int(fields[1])))
        except ValueError:
            raise ValueError(f"{path}:{lineno}: coordinates must be integers, got {line!r}") from None
    return points


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='unistroke_lib',
        description='Recognize a handwritten digit stroke by elastic matching',
    )
    parser.add_argument('--stroke', '-s', type=str, required=True,
                        help='Path to stroke file (one "x y" pair per line)')
    parser.add_argument('--templates', '-t', type=str,
                        default=config.DEFAULT_TEMPLATE_PATH,
                        help=f'Reference data file (default: {config.DEFAULT_TEMPLATE_PATH})')
    parser.add_argument('--accumulation', '-a',
                        choices=[m.value for m in AccumulationMode],
                        default=config.DEFAULT_ACCUMULATION,
                        help='Score accumulation mode (default: %(default)s)')
    parser.add_argument('--render', '-r', type=str, default=None,
                        help='Save a PNG of the normalized stroke over the matched reference')
    parser.add_argument('--json', action='store_true',
                        help='Print digit and all scores as JSON')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``.

    Returns:
        Process exit code.
    """
    args = _create_argument_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        recognizer = Recognizer.from_file(args.templates, args.accumulation)
    except TemplateLoadError as e:
        log.error("%s", e)
        return 1

    try:
        points = read_stroke_file(args.stroke)
    except (OSError, ValueError) as e:
        log.error("Could not read stroke: %s", e)
        return 1

    for point in points:
        if not recognizer.add_point(point):
            log.warning("Stroke file has %d points; using the first %d",
                        len(points), recognizer.num_points())
            break

    try:
        result = recognizer.match()
    except StrokeError as e:
        log.error("Cannot recognize stroke: %s", e)
        return 1

    if args.render:
        from .utils.rendering import render_match

        image = render_match(recognizer.stroke.points(),
                             recognizer.templates.stroke(result.digit))
        try:
            image.save(args.render)
        except (OSError, ValueError) as e:
            log.error("Could not save rendering: %s", e)
            return 1
        log.info("Saved match rendering to %s", args.render)

    if args.json:
        print(json.dumps(result.to_dict()))
    else:
        print(result.digit)
    return 0


if __name__ == '__main__':
    sys.exit(main())
