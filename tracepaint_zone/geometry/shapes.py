"""
Target Shapes Module
====================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Tagged union: Shape = Rect | Circle | Polygon, tagged by ShapeType
- Fail-fast validation at construction, never at query time
- to_dict()/from_dict() mirror the catalog record layout
"""

import math
import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union


class ShapeValidationError(ValueError):
    """Raised when a shape definition is malformed or degenerate."""


class ShapeType(str, Enum):
    """Shape tag as it appears in catalog records."""
    RECT = "rect"
    CIRCLE = "circle"
    POLYGON = "polygon"


def _finite(name: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ShapeValidationError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(number):
        raise ShapeValidationError(f"{name} must be finite, got {value!r}")
    return number


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle.

    Attributes:
        x: Left edge (pixels)
        y: Top edge (pixels)
        width: Extent along x, >= 0
        height: Extent along y, >= 0
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        for name in ("x", "y", "width", "height"):
            object.__setattr__(self, name, _finite(f"Rect {name}", getattr(self, name)))
        if self.width < 0 or self.height < 0:
            raise ShapeValidationError(
                f"Rect dimensions must be >= 0, got width={self.width}, height={self.height}"
            )

    @property
    def shape_type(self) -> ShapeType:
        return ShapeType.RECT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.shape_type.value,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class Circle:
    """
    Circle given by center and radius.

    Attributes:
        cx: Center x (pixels)
        cy: Center y (pixels)
        r: Radius, >= 0
    """

    cx: float
    cy: float
    r: float

    def __post_init__(self):
        for name in ("cx", "cy", "r"):
            object.__setattr__(self, name, _finite(f"Circle {name}", getattr(self, name)))
        if self.r < 0:
            raise ShapeValidationError(f"Circle radius must be >= 0, got {self.r}")

    @property
    def shape_type(self) -> ShapeType:
        return ShapeType.CIRCLE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.shape_type.value, "cx": self.cx, "cy": self.cy, "r": self.r}


@dataclass(frozen=True)
class Polygon:
    """
    Simple (possibly non-convex) polygon, implicitly closed.

    Points may be given as any sequence of (x, y) pairs, including an Nx2
    numpy array; they are stored as a tuple of float pairs so the shape
    stays hashable and immutable.

    Attributes:
        points: Ordered vertices, at least 3
    """

    points: Tuple[Tuple[float, float], ...]

    def __post_init__(self):
        raw = self.points
        if isinstance(raw, np.ndarray):
            if raw.ndim != 2 or raw.shape[1] != 2:
                raise ShapeValidationError(f"Polygon points must be Nx2 array, got shape {raw.shape}")
            raw = raw.tolist()

        try:
            pairs = [tuple(p) for p in raw]
        except TypeError as e:
            raise ShapeValidationError(f"Polygon points must be (x, y) pairs: {e}") from e

        if len(pairs) < 3:
            raise ShapeValidationError(f"Polygon must have at least 3 points, got {len(pairs)}")

        normalized = []
        for idx, pair in enumerate(pairs):
            if len(pair) != 2:
                raise ShapeValidationError(f"Polygon point {idx} must be an (x, y) pair, got {pair!r}")
            normalized.append((
                _finite(f"Polygon point {idx} x", pair[0]),
                _finite(f"Polygon point {idx} y", pair[1]),
            ))

        object.__setattr__(self, "points", tuple(normalized))

    @property
    def shape_type(self) -> ShapeType:
        return ShapeType.POLYGON

    @property
    def vertices(self) -> np.ndarray:
        """Read-only Nx2 float array of the vertices."""
        vertices = np.array(self.points, dtype=np.float64)
        vertices.flags.writeable = False
        return vertices

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.shape_type.value, "points": [list(p) for p in self.points]}


Shape = Union[Rect, Circle, Polygon]


def shape_from_dict(data: Dict[str, Any]) -> Shape:
    """
    Build a shape from a catalog-style record.

    Extra keys (id, name, ...) are ignored.

    Raises:
        ShapeValidationError: Unknown type, missing fields or invalid values
    """
    if not isinstance(data, dict):
        raise ShapeValidationError(f"Shape record must be a mapping, got {type(data).__name__}")

    try:
        shape_type = ShapeType(data.get("type"))
    except ValueError:
        raise ShapeValidationError(
            f"Invalid shape type: {data.get('type')!r}. "
            f"Must be one of {[t.value for t in ShapeType]}"
        )

    try:
        if shape_type is ShapeType.RECT:
            return Rect(x=data["x"], y=data["y"], width=data["width"], height=data["height"])
        if shape_type is ShapeType.CIRCLE:
            return Circle(cx=data["cx"], cy=data["cy"], r=data["r"])
        return Polygon(points=data["points"])
    except KeyError as e:
        raise ShapeValidationError(f"Missing required {shape_type.value} field: {e}")
