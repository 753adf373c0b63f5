"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Design:
- JSON output (one object per line)
- Wraps Python's logging module
- Contextual metadata (shape_id, zone, coverage, etc.)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="session")
    >>> logger.info(
    ...     event=LogEvent.COVERAGE_COMPUTED,
    ...     message="Coverage updated",
    ...     metadata={'shape_id': 'star', 'coverage': 42}
    ... )

Output:
    {
        "timestamp": "2025-10-24T15:30:45.123456",
        "level": "INFO",
        "component": "session",
        "event": "coverage.computed",
        "message": "Coverage updated",
        "metadata": {"shape_id": "star", "coverage": 42}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "session", "catalog")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "session")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: tracepaint.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"tracepaint.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(log_level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message (per-sample events such as zone transitions)."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log WARNING level message."""
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance, serialized as type + message

        Example:
            >>> try:
            ...     catalog = ShapeCatalog.from_file(path)
            ... except CatalogError as e:
            ...     logger.error(
            ...         event=LogEvent.CATALOG_ERROR,
            ...         message="Failed to load catalog",
            ...         exc_info=e,
            ...         metadata={'path': str(path)}
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change logging level dynamically."""
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Formatter used by StructuredLogger's default handler.

    The message built by StructuredLogger is already JSON, so it is
    passed through untouched.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("catalog", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
