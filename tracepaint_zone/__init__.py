"""
tracepaint Zone Core v1.0
=========================

Bounded Context: Precision and coverage tracking for "paint inside the
outline" exercises.

Design Philosophy:
- Separation of Concerns: Geometry, Analytics, Raster, Session separated
- Immutable shapes and immutable tracker state; scaling returns new shapes
- Configuration is passed in explicitly, never read from globals
- Fail fast: malformed shapes are rejected at construction

Architecture:

    tracepaint_zone/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shapes.py      # Rect, Circle, Polygon (tagged union)
    │   ├── spatial.py     # point_in_shape, distance_to_outline
    │   └── scaler.py      # scale_shape, scale_to_canvas
    │
    ├── analytics/         # Zones, transitions, coverage
    │   ├── classifier.py  # Zone, ZoneClassifier
    │   ├── tracker.py     # ZoneTransitionState, track_transition
    │   ├── coverage.py    # compute_coverage
    │   └── stats.py       # SessionStats
    │
    ├── raster/            # Paint sources
    │   ├── sources.py     # PaintSource, CanvasRaster, PaintLayer
    │   └── strokes.py     # StrokeLayer
    │
    ├── logging/           # JSON structured logging
    ├── catalog.py         # ShapeCatalog, TargetShape
    ├── config.py          # ExerciseConfig (YAML)
    └── session.py         # PaintSession orchestration

Usage:

    import supervision as sv
    from tracepaint_zone import (
        Rect, ProximityConfig, PaintLayer, classify, compute_coverage,
        reset_transitions, track_transition,
    )

    shape = Rect(x=0, y=0, width=100, height=100)
    zone = classify(sv.Point(x=120, y=50), shape, ProximityConfig())

    state = reset_transitions()
    state = track_transition(state, zone)

    coverage = compute_coverage(PaintLayer(alpha), shape)
"""

# Geometry Layer (immutable, stateless)
from tracepaint_zone.geometry import (
    Shape,
    ShapeType,
    Rect,
    Circle,
    Polygon,
    ShapeValidationError,
    shape_from_dict,
    point_in_shape,
    distance_to_outline,
    point_to_segment_distance,
    scale_shape,
    scale_to_canvas,
)

# Configuration
from tracepaint_zone.config import (
    ProximityConfig,
    CoverageConfig,
    CanvasConfig,
    ExerciseConfig,
)

# Analytics Layer
from tracepaint_zone.analytics import (
    Zone,
    ZoneClassifier,
    classify,
    ZoneTransitionState,
    ZoneTransitionTracker,
    track_transition,
    begin_stroke,
    reset_transitions,
    compute_coverage,
    SessionStats,
)

# Raster Layer
from tracepaint_zone.raster import PaintSource, CanvasRaster, PaintLayer, Stroke, StrokeLayer

# Catalog & Session (orchestration)
from tracepaint_zone.catalog import ShapeCatalog, TargetShape, CatalogError
from tracepaint_zone.session import PaintSession, SessionBuilder

__all__ = [
    # Geometry
    "Shape",
    "ShapeType",
    "Rect",
    "Circle",
    "Polygon",
    "ShapeValidationError",
    "shape_from_dict",
    "point_in_shape",
    "distance_to_outline",
    "point_to_segment_distance",
    "scale_shape",
    "scale_to_canvas",
    # Config
    "ProximityConfig",
    "CoverageConfig",
    "CanvasConfig",
    "ExerciseConfig",
    # Analytics
    "Zone",
    "ZoneClassifier",
    "classify",
    "ZoneTransitionState",
    "ZoneTransitionTracker",
    "track_transition",
    "begin_stroke",
    "reset_transitions",
    "compute_coverage",
    "SessionStats",
    # Raster
    "PaintSource",
    "CanvasRaster",
    "PaintLayer",
    "Stroke",
    "StrokeLayer",
    # Catalog & Session
    "ShapeCatalog",
    "TargetShape",
    "CatalogError",
    "PaintSession",
    "SessionBuilder",
]

__version__ = "1.0.0"
