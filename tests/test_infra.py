"""
Tests for structured logging and settings.
"""

import dataclasses
import json
import logging
import sys

import pytest

from veracity.config import Settings, settings
from veracity.logging import (
    JSONFormatter,
    TextFormatter,
    get_logger,
    setup_logging,
)


def _record(msg: str = "Test message") -> logging.LogRecord:
    return logging.LogRecord(
        name="veracity.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestLogging:
    """Structured logging tests."""

    def test_json_formatter(self):
        parsed = json.loads(JSONFormatter().format(_record()))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Test message"
        assert parsed["logger"] == "veracity.test"
        assert "timestamp" in parsed

    def test_json_formatter_extra_fields(self):
        record = _record("Analysis complete")
        record.overall_score = 72
        record.confidence_level = "Medium"
        record.unrelated = "dropped"
        parsed = json.loads(JSONFormatter().format(record))
        assert parsed["overall_score"] == 72
        assert parsed["confidence_level"] == "Medium"
        assert "unrelated" not in parsed

    def test_json_formatter_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record("failed")
            record.exc_info = sys.exc_info()
        parsed = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in parsed["exception"]

    def test_get_logger(self):
        log = get_logger("analyzer")
        assert log.name == "veracity.analyzer"

    def test_setup_logging_json(self):
        root = setup_logging(level="debug", fmt="json")
        assert root.name == "veracity"
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_setup_logging_text(self):
        root = setup_logging(level="WARNING", fmt="text")
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, TextFormatter)

    def test_setup_logging_is_idempotent(self):
        setup_logging(fmt="json")
        root = setup_logging(fmt="json")
        assert len(root.handlers) == 1


class TestSettings:

    def test_defaults(self):
        assert settings.MAX_TEXT_LENGTH == 50000
        assert settings.MAX_BATCH_ITEMS == 50
        assert settings.MAX_DURATION_SECONDS == 86400

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.MAX_BATCH_ITEMS = 1

    def test_override(self):
        custom = Settings(MAX_BATCH_ITEMS=5)
        assert custom.MAX_BATCH_ITEMS == 5
