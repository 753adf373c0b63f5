"""
Geometry Layer
==============

Bounded Context: Pure geometric shapes and spatial queries.

Responsibilities:
- Shape representation (immutable tagged union)
- Point-in-shape tests
- Point-to-outline distances
- Rescaling between canvas sizes
- NO state, NO counting, NO rendering
"""

from tracepaint_zone.geometry.shapes import (
    Shape,
    ShapeType,
    Rect,
    Circle,
    Polygon,
    ShapeValidationError,
    shape_from_dict,
)
from tracepaint_zone.geometry.spatial import (
    point_in_shape,
    point_in_polygon,
    distance_to_outline,
    point_to_segment_distance,
)
from tracepaint_zone.geometry.scaler import (
    scale_shape,
    scale_to_canvas,
    canvas_scale_factors,
)

__all__ = [
    "Shape",
    "ShapeType",
    "Rect",
    "Circle",
    "Polygon",
    "ShapeValidationError",
    "shape_from_dict",
    "point_in_shape",
    "point_in_polygon",
    "distance_to_outline",
    "point_to_segment_distance",
    "scale_shape",
    "scale_to_canvas",
    "canvas_scale_factors",
]
