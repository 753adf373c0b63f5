"""
Stroke Layer Module
===================

Paint-only layer built from recorded brush strokes.

Design:
- Records strokes as point lists (canvas coordinates)
- Rasterizes lazily with OpenCV into a transparent RGBA buffer
- Answers PaintSource queries like PaintLayer (alpha > 0 is paint)
- Rescaling produces a new layer, recorded strokes are never edited in place

Dependencies:
- opencv (polyline/circle rasterization)
- supervision (Color, Point)
"""

import cv2
import numpy as np
import supervision as sv
from dataclasses import dataclass
from typing import List, Optional, Tuple

from tracepaint_zone.raster.sources import PaintLayer


DEFAULT_BRUSH_COLOR = sv.Color(r=0, g=0, b=255)
DEFAULT_BRUSH_SIZE = 12


@dataclass(frozen=True)
class Stroke:
    """
    One committed brush stroke.

    Attributes:
        points: Ordered (x, y) canvas points
        color: Brush color
        size: Brush diameter in pixels
    """

    points: Tuple[Tuple[float, float], ...]
    color: sv.Color = DEFAULT_BRUSH_COLOR
    size: int = DEFAULT_BRUSH_SIZE

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Stroke size must be >= 1, got {self.size}")


class StrokeLayer:
    """
    Transparent paint layer fed by pointer strokes.

    Usage:
        layer = StrokeLayer(width=700, height=500)
        layer.begin_stroke(color=sv.Color.from_hex("#ff0000"), size=12)
        layer.add_point(sv.Point(x=100, y=100))
        layer.add_point(sv.Point(x=140, y=120))
        layer.end_stroke()

        coverage = compute_coverage(layer, shape)
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"StrokeLayer size must be positive, got {(width, height)}")
        self._width = int(width)
        self._height = int(height)
        self._strokes: List[Stroke] = []
        self._current: Optional[List[Tuple[float, float]]] = None
        self._current_color = DEFAULT_BRUSH_COLOR
        self._current_size = DEFAULT_BRUSH_SIZE
        self._painted: Optional[PaintLayer] = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def strokes(self) -> Tuple[Stroke, ...]:
        """Committed strokes, oldest first."""
        return tuple(self._strokes)

    @property
    def is_drawing(self) -> bool:
        return self._current is not None

    def begin_stroke(
        self,
        color: sv.Color = DEFAULT_BRUSH_COLOR,
        size: int = DEFAULT_BRUSH_SIZE,
    ) -> None:
        """Start a new stroke; an unfinished one is committed first."""
        if self._current is not None:
            self.end_stroke()
        if size < 1:
            raise ValueError(f"Brush size must be >= 1, got {size}")
        self._current = []
        self._current_color = color
        self._current_size = size

    def add_point(self, point: sv.Point) -> None:
        """Append a point to the stroke in progress."""
        if self._current is None:
            raise RuntimeError("add_point() called without begin_stroke()")
        self._current.append((float(point.x), float(point.y)))
        self._painted = None

    def end_stroke(self) -> Optional[Stroke]:
        """
        Commit the stroke in progress.

        Returns:
            The committed stroke, or None if no stroke was open or it had
            no points
        """
        points, self._current = self._current, None
        if not points:
            return None
        stroke = Stroke(points=tuple(points), color=self._current_color, size=self._current_size)
        self._strokes.append(stroke)
        self._painted = None
        return stroke

    def clear(self) -> None:
        """Drop all strokes, including one in progress."""
        self._strokes.clear()
        self._current = None
        self._painted = None

    def render(self) -> np.ndarray:
        """
        Rasterize all strokes (committed and in progress).

        Returns:
            HxWx4 uint8 RGBA buffer, transparent where unpainted
        """
        buffer = np.zeros((self._height, self._width, 4), dtype=np.uint8)

        pending = list(self._strokes)
        if self._current:
            pending.append(Stroke(
                points=tuple(self._current),
                color=self._current_color,
                size=self._current_size,
            ))

        for stroke in pending:
            color = (*stroke.color.as_rgb(), 255)
            pts = np.round(np.array(stroke.points, dtype=np.float64)).astype(np.int32)
            if len(pts) == 1:
                cv2.circle(
                    buffer,
                    center=(int(pts[0][0]), int(pts[0][1])),
                    radius=max(1, stroke.size // 2),
                    color=color,
                    thickness=-1,
                )
            else:
                cv2.polylines(
                    buffer,
                    [pts.reshape((-1, 1, 2))],
                    isClosed=False,
                    color=color,
                    thickness=stroke.size,
                    lineType=cv2.LINE_8,
                )

        return buffer

    def is_painted(self, x: int, y: int) -> bool:
        if self._painted is None:
            self._painted = PaintLayer(self.render())
        return self._painted.is_painted(x, y)

    def rescaled(
        self,
        scale_x: float,
        scale_y: float,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> "StrokeLayer":
        """
        New layer with every committed stroke scaled per axis.

        The layer size defaults to the scaled, rounded current size; brush
        sizes follow the smaller factor, like circle radii.
        """
        layer = StrokeLayer(
            width=width if width is not None else max(1, round(self._width * scale_x)),
            height=height if height is not None else max(1, round(self._height * scale_y)),
        )
        size_factor = min(scale_x, scale_y)
        for stroke in self._strokes:
            layer._strokes.append(Stroke(
                points=tuple((x * scale_x, y * scale_y) for x, y in stroke.points),
                color=stroke.color,
                size=max(1, round(stroke.size * size_factor)),
            ))
        return layer

    def __len__(self) -> int:
        return len(self._strokes)

    def __repr__(self) -> str:
        return f"StrokeLayer({self._width}x{self._height}, strokes={len(self._strokes)})"
