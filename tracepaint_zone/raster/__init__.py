"""
Raster Layer
============

Bounded Context: Paint rasters consumed by the coverage estimator.

Responsibilities:
- PaintSource protocol (width, height, is_painted)
- Composited canvas and paint-only layer accessors over numpy buffers
- Stroke recording and rasterization
"""

from tracepaint_zone.raster.sources import PaintSource, CanvasRaster, PaintLayer, bgr_to_rgba
from tracepaint_zone.raster.strokes import Stroke, StrokeLayer

__all__ = [
    "PaintSource",
    "CanvasRaster",
    "PaintLayer",
    "bgr_to_rgba",
    "Stroke",
    "StrokeLayer",
]
