"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)

Event Naming Convention:
    <component>.<category>.<action>

    component: catalog, config, session, zone, coverage, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - catalog.*: Shape catalog loading
    - config.*: Configuration loading
    - session.*: Paint session lifecycle
    - zone.*: Zone classification and transitions
    - coverage.*: Coverage estimation
    - error.*: Error conditions
    """

    # ========== Catalog Events ==========
    CATALOG_LOADED = "catalog.loaded"
    """Shape catalog parsed and validated."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Exercise configuration loaded from YAML."""

    # ========== Session Events ==========
    SESSION_STARTED = "session.started"
    """Paint session created for a target shape."""

    SESSION_RESET = "session.reset"
    """Counters, strokes and coverage cleared."""

    SHAPE_CHANGED = "session.shape_changed"
    """Session switched to a different target shape."""

    CANVAS_RESIZED = "session.canvas_resized"
    """Target shape rescaled to a new canvas size."""

    STROKE_STARTED = "session.stroke.started"
    """Pointer down, new stroke begun."""

    STROKE_FINISHED = "session.stroke.finished"
    """Pointer up, stroke committed."""

    # ========== Zone Events ==========
    ZONE_TRANSITION = "zone.transition"
    """Pointer moved into a different zone."""

    # ========== Coverage Events ==========
    COVERAGE_COMPUTED = "coverage.computed"
    """Coverage estimate refreshed."""

    # ========== Error Events ==========
    SHAPE_VALIDATION_ERROR = "error.shape_validation"
    """Shape definition rejected at construction."""

    CATALOG_ERROR = "error.catalog"
    """Catalog file missing, unreadable or inconsistent."""

    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""

    RASTER_ERROR = "error.raster"
    """Raster image could not be read or has an unsupported layout."""


# Event categories for filtering
SESSION_EVENTS = {
    LogEvent.SESSION_STARTED,
    LogEvent.SESSION_RESET,
    LogEvent.SHAPE_CHANGED,
    LogEvent.CANVAS_RESIZED,
    LogEvent.STROKE_STARTED,
    LogEvent.STROKE_FINISHED,
}

ERROR_EVENTS = {
    LogEvent.SHAPE_VALIDATION_ERROR,
    LogEvent.CATALOG_ERROR,
    LogEvent.CONFIG_ERROR,
    LogEvent.RASTER_ERROR,
}
