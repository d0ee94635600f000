"""Tests for structured log formatting."""

import logging

from exposure_engine.core.logging import StructuredFormatter, get_logger, log_with_context
from exposure_engine.core.scoring.types import TargetTier


def make_record(msg: str = "Scored profile", **extra) -> logging.LogRecord:
    record = logging.LogRecord("exposure_engine.test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_core_fields(self):
        line = StructuredFormatter().format(make_record())
        assert "level=INFO" in line
        assert 'message="Scored profile"' in line

    def test_request_id_and_context(self):
        record = make_record(request_id="abc123", context={"best_fit": TargetTier.JUCO, "grad_year": 2027})
        line = StructuredFormatter().format(record)
        assert "request_id=abc123" in line
        assert "best_fit=JUCO" in line
        assert line.endswith("grad_year=2027")


class TestLogWithContext:
    def test_context_reaches_handler(self):
        logger = get_logger("exposure_engine.test_context")
        captured: list[logging.LogRecord] = []

        class Capture(logging.Handler):
            def emit(self, record):
                captured.append(record)

        handler = Capture()
        logger.addHandler(handler)
        try:
            log_with_context(logger, logging.WARNING, "Cap fired", request_id="r1", cap_id="d1_core_gpa")
        finally:
            logger.removeHandler(handler)

        assert captured[0].request_id == "r1"
        assert captured[0].context == {"cap_id": "d1_core_gpa"}
