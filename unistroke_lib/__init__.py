"""Unistroke Digit Recognizer.

Classifies a single freehand pen stroke as one of ten digits by elastic
matching: the stroke is normalized into a canonical frame and compared
point by point against ten reference strokes.

The package is organized into the following modules:
    domain: Value objects (Point, BBox) and the bounded StrokeBuffer.
    templates: The immutable TemplateSet and its text file format.
    processing: Translate, scale and resample normalization.
    matching: Score computation and best-match selection.
    api: The Recognizer facade used by pen-input front ends.
    cli: Command line front end (``python -m unistroke_lib``).

Pipeline:
    capture (StrokeBuffer) -> translate -> scale -> resample to 150 points
    -> score against each reference -> lowest score wins.

Example usage:
    Recognizing a stroke::

        from unistroke_lib import Recognizer

        recognizer = Recognizer.from_file('strokedata.txt')
        for x, y in samples:
            recognizer.add_point((x, y))
        print(recognizer.find_match())

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .api import Recognizer
from .domain import BBox, Point, StrokeBuffer
from .errors import (
    EmptyStrokeError,
    InsufficientPointsError,
    PointIndexError,
    StrokeError,
    StrokeFullError,
    TemplateLoadError,
)
from .matching import AccumulationMode, ElasticMatcher, MatchResult
from .processing import Normalizer
from .templates import TemplateSet, load_template_file

__all__ = [
    # Domain objects
    'Point', 'BBox', 'StrokeBuffer',
    # Reference data
    'TemplateSet', 'load_template_file',
    # Pipeline
    'Normalizer', 'ElasticMatcher', 'AccumulationMode', 'MatchResult',
    # Facade
    'Recognizer',
    # Errors
    'StrokeError', 'EmptyStrokeError', 'InsufficientPointsError',
    'StrokeFullError', 'PointIndexError', 'TemplateLoadError',
]

__version__ = '1.0.0'
