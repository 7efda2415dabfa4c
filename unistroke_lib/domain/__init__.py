"""Domain objects for unistroke recognition.

Geometry classes:
    Point: Immutable 2D integer point with distance and midpoint.
    BBox: Immutable bounding box of a point sequence.

Stroke classes:
    StrokeBuffer: Capacity-bounded, mutable sequence of points for the
        stroke being captured.

Example usage:
    Working with geometry::

        from unistroke_lib.domain import Point, StrokeBuffer

        p1 = Point(0, 0)
        p2 = Point(3, 4)
        distance = p1.distance_to(p2)  # 5.0

        buf = StrokeBuffer()
        buf.append(p1)
        buf.append(p2)
        print(buf.bbox().to_tuple())  # (0, 0, 3, 4)
"""

from .geometry import BBox, Point
from .stroke import StrokeBuffer

__all__ = ['Point', 'BBox', 'StrokeBuffer']
