"""Unit tests for telemetry module."""

import json
import logging
import sys

import pytest

from mediathumb.commons.telemetry.decorators import LogContext, timed
from mediathumb.commons.telemetry.logger import (
    JsonFormatter,
    TextFormatter,
    clear_log_context,
    configure_logging,
    get_log_context,
    set_log_context,
)


def _record(msg="Test message", level=logging.INFO, exc_info=None, name="test.logger"):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="/test/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestLogContext:
    """Tests for logging context management."""

    def setup_method(self):
        clear_log_context()

    def teardown_method(self):
        clear_log_context()

    def test_set_and_get_context(self):
        set_log_context(operation="compress_image", mime_type="image/png")
        ctx = get_log_context()
        assert ctx["operation"] == "compress_image"
        assert ctx["mime_type"] == "image/png"

    def test_context_is_copied(self):
        set_log_context(key="value")
        ctx = get_log_context()
        ctx["new_key"] = "new_value"
        assert "new_key" not in get_log_context()

    def test_log_context_manager_restores(self):
        set_log_context(outer="yes")
        with LogContext(operation="create_video_thumbnail"):
            assert get_log_context() == {
                "outer": "yes",
                "operation": "create_video_thumbnail",
            }
        assert get_log_context() == {"outer": "yes"}

    def test_log_context_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with LogContext(operation="compress_image"):
                raise RuntimeError("boom")
        assert get_log_context() == {}


class TestJsonFormatter:
    """Tests for JSON log formatter."""

    def teardown_method(self):
        clear_log_context()

    def test_basic_format(self):
        data = json.loads(JsonFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["path"] == "/test/file.py:42"

    def test_without_path(self):
        data = json.loads(JsonFormatter(include_path=False).format(_record()))
        assert "path" not in data

    def test_format_with_context(self):
        set_log_context(operation="compress_image")
        data = json.loads(JsonFormatter().format(_record()))
        assert data["context"]["operation"] == "compress_image"

    def test_format_with_extra(self):
        record = _record()
        record.duration_ms = 12.5
        data = json.loads(JsonFormatter().format(record))
        assert data["duration_ms"] == 12.5

    def test_format_with_exception(self):
        try:
            raise ValueError("Test error")
        except ValueError:
            record = _record(level=logging.ERROR, exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))
        assert "ValueError" in data["exception"]


class TestTextFormatter:
    """Tests for text log formatter."""

    def teardown_method(self):
        clear_log_context()

    def test_basic_format(self):
        output = TextFormatter().format(_record())

        assert "INFO" in output
        assert "[test.logger]" in output
        assert "Test message" in output

    def test_includes_operation(self):
        set_log_context(operation="create_video_thumbnail")
        output = TextFormatter().format(_record())
        assert "[create_video_thumbnail]" in output


class TestConfigureLogging:
    """Tests for logger configuration."""

    def test_configure_json_logger(self):
        logger = configure_logging(
            level="DEBUG", format_type="json", logger_name="test.json"
        )
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)
        assert logger.propagate is False

    def test_configure_text_logger(self):
        logger = configure_logging(
            level="INFO", format_type="text", logger_name="test.text"
        )
        assert logger.level == logging.INFO
        assert isinstance(logger.handlers[0].formatter, TextFormatter)

    def test_reconfigure_replaces_handlers(self):
        configure_logging(logger_name="test.again")
        logger = configure_logging(logger_name="test.again")
        assert len(logger.handlers) == 1


class TestTimed:
    """Tests for the timed decorator."""

    def test_sync_function_logs_duration(self, caplog):
        @timed(logger=logging.getLogger("test.timed"), level=logging.INFO)
        def work(x):
            return x * 2

        with caplog.at_level(logging.INFO, logger="test.timed"):
            assert work(21) == 42

        record = next(r for r in caplog.records if r.name == "test.timed")
        assert "work completed" in record.getMessage()
        assert record.duration_ms >= 0

    async def test_async_function_logs_on_failure(self, caplog):
        @timed(logger=logging.getLogger("test.timed.async"), level=logging.INFO)
        async def failing():
            raise RuntimeError("boom")

        with caplog.at_level(logging.INFO, logger="test.timed.async"):
            with pytest.raises(RuntimeError):
                await failing()

        assert any("failing completed" in r.getMessage() for r in caplog.records)

    def test_threshold_suppresses_fast_calls(self, caplog):
        @timed(
            logger=logging.getLogger("test.timed.threshold"),
            level=logging.INFO,
            threshold_ms=10_000,
        )
        def quick():
            return 1

        with caplog.at_level(logging.INFO, logger="test.timed.threshold"):
            quick()

        assert not [r for r in caplog.records if r.name == "test.timed.threshold"]

    async def test_bare_decorator_preserves_coroutine(self):
        @timed
        async def value():
            return "ok"

        assert await value() == "ok"
