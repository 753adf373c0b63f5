"""
Structured Logging for tracepaint
=================================

Bounded Context: Observability

JSON-structured logging for the paint exercise core.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from tracepaint_zone.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="session")
    >>> logger.info(
    ...     event=LogEvent.STROKE_FINISHED,
    ...     message="Stroke committed",
    ...     metadata={'shape_id': 'square', 'points': 17}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
