"""Shared configuration for the unistroke recognizer.

This module centralizes the constants used by:
    - domain.stroke (buffer capacity)
    - templates (reference set shape and default data file)
    - processing.normalize (canonical frame size)
    - matching.matcher (score accumulation mode)

Components take these values as keyword defaults, so tests and callers
can override them without touching this module.
"""

# Number of points in every normalized stroke and every reference stroke
STROKE_SIZE = 150

# Number of reference strokes (one per digit class 0-9)
NUM_STROKES = 10

# Longer bounding-box side after scaling into the canonical frame
CANVAS_EXTENT = 250

# Reference data file read when no path is given
DEFAULT_TEMPLATE_PATH = 'strokedata.txt'

# Score accumulation: 'each-step' truncates the running total after every
# addition, 'once' sums in full precision and truncates at the end
DEFAULT_ACCUMULATION = 'each-step'
