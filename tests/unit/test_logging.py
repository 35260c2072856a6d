"""Tests for logging configuration."""

import logging

from loguru import logger

from astrobookings.core.logging import (
    InterceptHandler,
    add_trace_id,
    intercept_standard_logging,
)
from astrobookings.core.trace_context import trace_id_context


def test_add_trace_id_without_context():
    record = {"extra": {}}

    assert add_trace_id(record) is True
    assert record["extra"]["trace_id"] == "N/A"


def test_add_trace_id_with_context():
    token = trace_id_context.set("trace-42")
    try:
        record = {"extra": {}}
        add_trace_id(record)
    finally:
        trace_id_context.reset(token)

    assert record["extra"]["trace_id"] == "trace-42"


def test_intercept_handler_forwards_to_loguru():
    messages: list[str] = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]))
    try:
        std_logger = logging.getLogger("astrobookings.test")
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
        std_logger.setLevel(logging.INFO)

        std_logger.warning("from stdlib")
    finally:
        logger.remove(sink_id)

    assert "from stdlib" in messages


def test_intercept_handler_unknown_level():
    messages: list[str] = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]))
    try:
        record = logging.LogRecord("x", 15, __file__, 1, "custom level", None, None)
        record.levelname = "CUSTOM"
        InterceptHandler().emit(record)
    finally:
        logger.remove(sink_id)

    assert "custom level" in messages


def test_intercept_standard_logging_installs_handlers():
    intercept_standard_logging()

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error", "fastapi"):
        std_logger = logging.getLogger(name)
        assert std_logger.propagate is False
        assert isinstance(std_logger.handlers[0], InterceptHandler)
