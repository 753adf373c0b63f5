#
# test_logging.py: structured JSON logger
#

import json
import logging

from tracepaint_zone.logging import JSONFormatter, LogEvent, StructuredLogger, create_logger
from tracepaint_zone.logging.events import ERROR_EVENTS, SESSION_EVENTS


def entries(caplog, name):
    return [json.loads(r.getMessage()) for r in caplog.records if r.name == name]


def test_entry_fields(caplog):
    logger = StructuredLogger(component="test-fields")
    logger.info(
        event=LogEvent.COVERAGE_COMPUTED,
        message="Coverage 42%",
        metadata={"shape_id": "star", "coverage": 42},
    )

    (entry,) = entries(caplog, "tracepaint.test-fields")
    assert entry["level"] == "INFO"
    assert entry["component"] == "test-fields"
    assert entry["event"] == "coverage.computed"
    assert entry["message"] == "Coverage 42%"
    assert entry["metadata"] == {"shape_id": "star", "coverage": 42}
    assert "timestamp" in entry
    assert "exception" not in entry


def test_debug_suppressed_at_info(caplog):
    logger = StructuredLogger(component="test-levels")
    logger.debug(event=LogEvent.ZONE_TRANSITION, message="INSIDE -> OUTSIDE_NEAR")
    assert entries(caplog, "tracepaint.test-levels") == []

    logger.set_level(logging.DEBUG)
    logger.debug(event=LogEvent.ZONE_TRANSITION, message="INSIDE -> OUTSIDE_NEAR")
    (entry,) = entries(caplog, "tracepaint.test-levels")
    assert entry["level"] == "DEBUG"
    assert "metadata" not in entry


def test_error_carries_exception(caplog):
    logger = create_logger("test-errors")
    logger.error(
        event=LogEvent.CATALOG_ERROR,
        message="Failed to load shape catalog",
        metadata={"path": "missing.yaml"},
        exc_info=ValueError("Catalog file not found"),
    )
    (entry,) = entries(caplog, "tracepaint.test-errors")
    assert entry["level"] == "ERROR"
    assert entry["exception"] == {"type": "ValueError", "message": "Catalog file not found"}


def test_custom_logger_name(caplog):
    logger = StructuredLogger(component="cli", logger_name="tracepaint.test-custom")
    logger.warning(event=LogEvent.CONFIG_ERROR, message="Unknown key")
    (entry,) = entries(caplog, "tracepaint.test-custom")
    assert entry["component"] == "cli"


def test_handler_is_not_duplicated():
    first = StructuredLogger(component="test-handlers")
    second = StructuredLogger(component="test-handlers")
    assert first.logger is second.logger
    assert len(second.logger.handlers) == 1
    assert isinstance(second.logger.handlers[0].formatter, JSONFormatter)


def test_event_groups():
    assert LogEvent.SESSION_STARTED in SESSION_EVENTS
    assert LogEvent.CATALOG_ERROR in ERROR_EVENTS
    assert not SESSION_EVENTS & ERROR_EVENTS
