"""Unit tests for logging configuration.

These tests verify JSON formatting, request ID handling, and logging setup.
"""

import json
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from gemurl.config import Config
from gemurl.logging_config import (
    JsonFormatter,
    RequestIdFilter,
    _get_log_file,
    get_logger,
    request_id_var,
    setup_logging,
)


@pytest.fixture(autouse=True)
def clean_logger_state():
    """Ensure clean logger state before and after each test."""
    root = logging.getLogger()
    gemurl_logger = logging.getLogger("gemurl")

    original_root_handlers = root.handlers[:]
    original_root_level = root.level
    original_gemurl_level = gemurl_logger.level

    yield

    for handler in root.handlers:
        if handler not in original_root_handlers:
            handler.close()
    root.handlers = original_root_handlers
    root.setLevel(original_root_level)
    gemurl_logger.setLevel(original_gemurl_level)


def _make_config(**overrides) -> Config:
    values = {
        "log_level": "INFO",
        "log_mode": "stderr",
        "log_file": None,
        "max_url_length": 1024,
        "enable_health_check": True,
    }
    values.update(overrides)
    return Config(**values)


def _make_record(msg: str = "Test message", exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJsonFormatter:
    """Tests for JsonFormatter class."""

    def test_json_formatter_basic(self):
        """Test JsonFormatter outputs valid JSON with basic fields."""
        log_obj = json.loads(JsonFormatter().format(_make_record()))

        assert set(log_obj.keys()) == {"timestamp", "level", "logger", "message"}
        assert log_obj["level"] == "INFO"
        assert log_obj["logger"] == "test.logger"
        assert log_obj["message"] == "Test message"
        datetime.fromisoformat(log_obj["timestamp"])

    def test_json_formatter_with_request_id(self):
        """Test JsonFormatter includes request_id when set in context."""
        token = request_id_var.set("req-123")
        try:
            log_obj = json.loads(JsonFormatter().format(_make_record()))
            assert log_obj["request_id"] == "req-123"
        finally:
            request_id_var.reset(token)

    def test_json_formatter_with_extras(self):
        """Test JsonFormatter includes known extra fields from record."""
        record = _make_record()
        record.tool = "resolve_url"
        record.url = "gemini://example.org/"
        record.duration = 1.23
        record.error_code = "validation_error"

        log_obj = json.loads(JsonFormatter().format(record))

        assert log_obj["tool"] == "resolve_url"
        assert log_obj["url"] == "gemini://example.org/"
        assert log_obj["duration"] == 1.23
        assert log_obj["error_code"] == "validation_error"

    def test_json_formatter_with_exception(self):
        """Test JsonFormatter formats exception info."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        log_obj = json.loads(JsonFormatter().format(_make_record(exc_info=exc_info)))

        assert "ValueError: Test error" in log_obj["exception"]
        assert "Traceback" in log_obj["exception"]

    def test_json_formatter_keeps_unicode_hosts_readable(self):
        """Test non-ASCII text is written as-is, not as escapes."""
        output = JsonFormatter().format(_make_record("Resolved gemini://bücher.example/"))

        assert "bücher" in output
        assert json.loads(output)["message"] == "Resolved gemini://bücher.example/"


class TestRequestIdFilter:
    """Tests for RequestIdFilter class."""

    def test_request_id_filter(self):
        """Test RequestIdFilter injects request_id into log records."""
        record = _make_record()
        token = request_id_var.set("req-456")
        try:
            assert RequestIdFilter().filter(record) is True
            assert record.request_id == "req-456"  # type: ignore[attr-defined]
        finally:
            request_id_var.reset(token)

    def test_request_id_filter_without_context(self):
        """Test RequestIdFilter passes through when no request_id in context."""
        record = _make_record()
        token = request_id_var.set(None)
        try:
            assert RequestIdFilter().filter(record) is True
            assert not hasattr(record, "request_id")
        finally:
            request_id_var.reset(token)


class TestGetLogger:
    """Tests for get_logger() function."""

    def test_get_logger_namespace(self):
        """Test get_logger() returns logger with correct namespace."""
        assert get_logger("url.resolve").name == "gemurl.url.resolve"

    def test_get_logger_different_names(self):
        """Test get_logger() returns different loggers for different names."""
        assert get_logger("tools.parse") is not get_logger("tools.hosts")


class TestSetupLogging:
    """Tests for setup_logging() function."""

    def test_setup_logging_stderr_mode(self):
        """Test setup_logging() adds a JSON stderr handler in stderr mode."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()

        setup_logging(_make_config())

        assert len(root_logger.handlers) == 1
        handler = root_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream == sys.stderr
        assert isinstance(handler.formatter, JsonFormatter)

    def test_setup_logging_file_mode(self, tmp_path: Path):
        """Test setup_logging() adds a rotating file handler in file mode."""
        log_file = tmp_path / "logs" / "gemurl.log"
        root_logger = logging.getLogger()
        root_logger.handlers.clear()

        setup_logging(_make_config(log_mode="file", log_file=log_file, log_level="DEBUG"))

        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], RotatingFileHandler)
        assert log_file.parent.exists()
        assert logging.getLogger("gemurl").level == logging.DEBUG

    def test_setup_logging_both_mode(self, tmp_path: Path):
        """Test setup_logging() adds both handlers in both mode."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()

        setup_logging(_make_config(log_mode="both", log_file=tmp_path / "gemurl.log"))

        assert len(root_logger.handlers) == 2

    def test_setup_logging_does_not_duplicate_handlers(self):
        """Test calling setup_logging() twice leaves one handler."""
        root_logger = logging.getLogger()
        setup_logging(_make_config())
        setup_logging(_make_config())

        assert len(root_logger.handlers) == 1


class TestGetLogFile:
    """Tests for _get_log_file() helper."""

    def test_get_log_file_uses_configured_path(self, tmp_path: Path):
        """Test an explicit log file path is used as given."""
        log_file = tmp_path / "custom.log"
        assert _get_log_file(_make_config(log_file=log_file)) == log_file

    def test_get_log_file_defaults_to_timestamped_file(self):
        """Test a timestamped gemurl log file is chosen when none is configured."""
        log_file = _get_log_file(_make_config())

        assert log_file.name.startswith("gemurl-")
        assert log_file.suffix == ".log"
        assert log_file.parent.name == "logs"
