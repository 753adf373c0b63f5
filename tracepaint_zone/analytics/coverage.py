"""
Coverage Estimator Module
=========================

Grid-sampled estimate of how much of a shape's interior is painted.

Design:
- Stateless: paint source + shape + config in, percentage out
- Cost is proportional to canvas area / stride², so callers run it at
  stroke boundaries (pointer up), not on every move
- Whether a pixel is paint is decided by the PaintSource, not here
"""

import math
import supervision as sv
from typing import Optional, Union

from tracepaint_zone.config import CoverageConfig
from tracepaint_zone.geometry.shapes import Shape
from tracepaint_zone.geometry.spatial import point_in_shape
from tracepaint_zone.raster.sources import PaintSource


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round halves away from zero for non-negative values (50.5 -> 51)."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def compute_coverage(
    paint_source: PaintSource,
    shape: Shape,
    width: Optional[int] = None,
    height: Optional[int] = None,
    config: CoverageConfig = CoverageConfig(),
) -> Union[int, float]:
    """
    Estimate the painted percentage of a shape's interior.

    Samples the grid (x, y) for x in [0, width), y in [0, height) with
    config.stride; points outside the shape are ignored.

    Args:
        paint_source: Raster accessor
        shape: Target shape in the raster's coordinate space
        width: Sampled area width (default: paint_source.width)
        height: Sampled area height (default: paint_source.height)
        config: Stride and rounding

    Returns:
        Percentage in [0, 100]; int when config.decimals == 0, otherwise
        a float with one decimal. A shape with no sampled interior yields 0.
    """
    width = paint_source.width if width is None else width
    height = paint_source.height if height is None else height
    stride = config.stride

    inside_count = 0
    painted_inside_count = 0

    for y in range(0, height, stride):
        for x in range(0, width, stride):
            if not point_in_shape(sv.Point(x=x, y=y), shape):
                continue
            inside_count += 1
            if paint_source.is_painted(x, y):
                painted_inside_count += 1

    percent = 100 * painted_inside_count / max(1, inside_count)
    percent = min(100.0, round_half_up(percent, config.decimals))

    if config.decimals == 0:
        return int(percent)
    return percent
