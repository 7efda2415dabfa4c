"""Exceptions raised by the unistroke recognizer.

Stroke precondition violations derive from ValueError so callers that
already guard numeric input keep working. Out-of-range point access is an
IndexError. Reference data problems are a RuntimeError: the recognizer
cannot run without a complete template set.
"""


class StrokeError(ValueError):
    """Base class for stroke precondition violations."""


class EmptyStrokeError(StrokeError):
    """Operation needs at least one point but the stroke is empty."""


class InsufficientPointsError(StrokeError):
    """Resampling needs at least two points."""

    def __init__(self, count: int, required: int = 2):
        super().__init__(
            f"Resampling needs at least {required} points, stroke has {count}"
        )
        self.count = count
        self.required = required


class StrokeFullError(StrokeError):
    """A point was inserted into a buffer already at capacity."""

    def __init__(self, capacity: int):
        super().__init__(f"Stroke is full ({capacity} points)")
        self.capacity = capacity


class PointIndexError(IndexError):
    """Point index outside ``[0, length)``."""

    def __init__(self, index: int, length: int):
        super().__init__(f"Point index {index} out of range for stroke of {length} points")
        self.index = index
        self.length = length


class TemplateLoadError(RuntimeError):
    """Reference data is missing, malformed, or incomplete."""
