"""
Shape Scaler Module
===================

Affine rescale of shapes between canvas sizes.

Design:
- Returns new shapes, inputs are never mutated
- Circle radius follows the smaller axis factor so it stays a circle
"""

from typing import Tuple

from tracepaint_zone.geometry.shapes import Shape, Rect, Circle, Polygon


def scale_shape(shape: Shape, scale_x: float, scale_y: float) -> Shape:
    """
    Scale a shape per axis.

    Args:
        shape: Source shape (left untouched)
        scale_x: Factor applied to x coordinates and widths
        scale_y: Factor applied to y coordinates and heights

    Returns:
        New shape of the same kind

    Raises:
        ShapeValidationError: If the factors produce a degenerate shape
            (e.g. negative width)
    """
    match shape:
        case Rect(x=x, y=y, width=width, height=height):
            return Rect(
                x=x * scale_x,
                y=y * scale_y,
                width=width * scale_x,
                height=height * scale_y,
            )
        case Circle(cx=cx, cy=cy, r=r):
            return Circle(cx=cx * scale_x, cy=cy * scale_y, r=r * min(scale_x, scale_y))
        case Polygon(points=points):
            return Polygon(points=tuple((px * scale_x, py * scale_y) for px, py in points))
        case _:
            raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def canvas_scale_factors(
    canvas_wh: Tuple[int, int],
    reference_wh: Tuple[int, int],
) -> Tuple[float, float]:
    """Per-axis factors mapping the reference canvas onto canvas_wh."""
    ref_width, ref_height = reference_wh
    if ref_width <= 0 or ref_height <= 0:
        raise ValueError(f"reference_wh must be positive, got {reference_wh}")
    width, height = canvas_wh
    return width / ref_width, height / ref_height


def scale_to_canvas(
    shape: Shape,
    canvas_wh: Tuple[int, int],
    reference_wh: Tuple[int, int],
) -> Shape:
    """
    Rescale a shape authored for reference_wh onto a canvas of canvas_wh.

    Example:
        >>> scale_to_canvas(Rect(100, 100, 200, 100), (350, 250), (700, 500))
        Rect(x=50.0, y=50.0, width=100.0, height=50.0)
    """
    scale_x, scale_y = canvas_scale_factors(canvas_wh, reference_wh)
    return scale_shape(shape, scale_x, scale_y)
