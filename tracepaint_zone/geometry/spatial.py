"""
Spatial Queries Module
======================

Point containment and point-to-outline distance for every shape kind.

Design:
- Pure functions (no state)
- Exhaustive dispatch over the Shape union with structural pattern matching
- Total over well-formed shapes: any finite point yields an answer
"""

import math
import supervision as sv
from typing import Sequence, Tuple

from tracepaint_zone.geometry.shapes import Shape, Rect, Circle, Polygon


def point_in_polygon(point: sv.Point, points: Sequence[Tuple[float, float]]) -> bool:
    """
    Even-odd (crossing number) test.

    Casts a ray towards +x and flips parity for each edge whose y-span
    straddles the point and whose intercept lies to the right of it.
    Points exactly on an edge may land on either side.
    """
    inside = False
    j = len(points) - 1
    for i in range(len(points)):
        xi, yi = points[i]
        xj, yj = points[j]
        if (yi > point.y) != (yj > point.y):
            x_intercept = (xj - xi) * (point.y - yi) / (yj - yi) + xi
            if point.x < x_intercept:
                inside = not inside
        j = i
    return inside


def point_in_shape(point: sv.Point, shape: Shape) -> bool:
    """
    Check whether a point lies inside a shape.

    Rect and circle boundaries are inclusive.

    Args:
        point: Canvas-space point
        shape: Target shape

    Returns:
        True if the point is inside (or on the boundary of a rect/circle)
    """
    match shape:
        case Rect(x=x, y=y, width=width, height=height):
            return x <= point.x <= x + width and y <= point.y <= y + height
        case Circle(cx=cx, cy=cy, r=r):
            dx = point.x - cx
            dy = point.y - cy
            return dx * dx + dy * dy <= r * r
        case Polygon(points=points):
            return point_in_polygon(point, points)
        case _:
            raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def point_to_segment_distance(
    point: sv.Point,
    start: Tuple[float, float],
    end: Tuple[float, float],
) -> float:
    """
    Euclidean distance from a point to a closed segment.

    The projection parameter is clamped to [0, 1]; a zero-length segment
    collapses to the distance to its single point.
    """
    x1, y1 = start
    x2, y2 = end
    seg_dx = x2 - x1
    seg_dy = y2 - y1
    length_sq = seg_dx * seg_dx + seg_dy * seg_dy

    if length_sq == 0:
        return math.hypot(point.x - x1, point.y - y1)

    t = ((point.x - x1) * seg_dx + (point.y - y1) * seg_dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(point.x - (x1 + t * seg_dx), point.y - (y1 + t * seg_dy))


def distance_to_outline(point: sv.Point, shape: Shape) -> float:
    """
    Distance from a point to the shape outline, in pixels.

    Meant for points outside the shape; for a rect the result is 0 for
    any point inside, for circle and polygon it is the distance to the
    nearest boundary.

    Args:
        point: Canvas-space point
        shape: Target shape

    Returns:
        Non-negative distance
    """
    match shape:
        case Rect(x=x, y=y, width=width, height=height):
            dx = max(0.0, x - point.x, point.x - (x + width))
            dy = max(0.0, y - point.y, point.y - (y + height))
            return math.hypot(dx, dy)
        case Circle(cx=cx, cy=cy, r=r):
            return abs(math.hypot(point.x - cx, point.y - cy) - r)
        case Polygon(points=points):
            n = len(points)
            return min(
                point_to_segment_distance(point, points[i], points[(i + 1) % n])
                for i in range(n)
            )
        case _:
            raise TypeError(f"Unsupported shape: {type(shape).__name__}")
