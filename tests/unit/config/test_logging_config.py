"""Tests for centralized logging configuration."""

import json
import logging
import logging.handlers
import os
from unittest.mock import patch

import pytest

from tabtimetrack.config.logging_config import (
    JSONFormatter,
    LoggingConfig,
    configure_logging,
    get_logger,
    reset_logging,
)
from tabtimetrack.utils.logging_utils import ContextFilter, LogContext


def make_record(message="Test message", **extra):
    record = logging.LogRecord(
        name="test_logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLoggingConfig:
    """Test LoggingConfig class."""

    def test_default_configuration(self):
        """Test default logging configuration."""
        config = LoggingConfig()

        assert config.log_level == "WARNING"
        assert config.log_format == "standard"
        assert config.log_file is None
        assert config.max_file_size == 10 * 1024 * 1024  # 10MB
        assert config.backup_count == 5

    def test_environment_variable_override(self):
        """Test configuration from environment variables."""
        with patch.dict(
            os.environ,
            {
                "LOG_LEVEL": "DEBUG",
                "LOG_FORMAT": "json",
                "LOG_FILE": "/tmp/test.log",
                "LOG_MAX_FILE_SIZE": "5242880",  # 5MB
                "LOG_BACKUP_COUNT": "3",
            },
        ):
            config = LoggingConfig.from_env()

            assert config.log_level == "DEBUG"
            assert config.log_format == "json"
            assert config.log_file == "/tmp/test.log"
            assert config.max_file_size == 5242880
            assert config.backup_count == 3

    def test_from_env_default_level(self, monkeypatch):
        """Test the fallback level when LOG_LEVEL is unset."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert LoggingConfig.from_env(default_level="ERROR").log_level == "ERROR"

    def test_level_normalized(self):
        """Test that lower case levels are accepted."""
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test invalid log level raises error."""
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggingConfig(log_level="INVALID")

    def test_invalid_log_format(self):
        """Test invalid log format raises error."""
        with pytest.raises(ValueError, match="Invalid log format"):
            LoggingConfig(log_format="invalid")


class TestConfigureLogging:
    """Test configure_logging function."""

    def teardown_method(self):
        """Reset logging after each test."""
        reset_logging()

    def test_console_handler_configuration(self):
        """Test console handler is configured correctly."""
        configure_logging(LoggingConfig(log_level="DEBUG"))

        root_logger = logging.getLogger()
        stream_handlers = [
            h for h in root_logger.handlers if isinstance(h, logging.StreamHandler)
        ]
        assert len(stream_handlers) == 1
        assert root_logger.level == logging.DEBUG

    def test_handlers_carry_context_filter(self):
        """Test that every handler copies LogContext fields."""
        configure_logging(LoggingConfig())

        for handler in logging.getLogger().handlers:
            assert any(isinstance(f, ContextFilter) for f in handler.filters)

    def test_log_level_filtering(self):
        """Test log level filtering works correctly."""
        configure_logging(LoggingConfig(log_level="WARNING"))

        root_logger = logging.getLogger()
        assert root_logger.level == logging.WARNING
        for handler in root_logger.handlers:
            assert handler.level == logging.WARNING

    def test_reconfigure_replaces_handlers(self):
        """Test that configuring twice does not duplicate handlers."""
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())
        assert len(logging.getLogger().handlers) == 1

    def test_file_handler_configuration(self, tmp_path):
        """Test file handler is configured correctly."""
        log_file = tmp_path / "logs" / "test.log"
        configure_logging(LoggingConfig(log_level="INFO", log_file=str(log_file)))

        root_logger = logging.getLogger()
        assert any(
            isinstance(h, logging.handlers.RotatingFileHandler)
            for h in root_logger.handlers
        )

        with LogContext(source="august.txt"):
            get_logger("test_module").info("Test file message")

        for handler in root_logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "Test file message" in content

    def test_json_file_output(self, tmp_path):
        """Test that JSON lines include context fields."""
        log_file = tmp_path / "test.json.log"
        configure_logging(
            LoggingConfig(log_level="INFO", log_format="json", log_file=str(log_file))
        )

        with LogContext(source="august.txt"):
            get_logger("test_module").info("Parsed")

        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().splitlines()[-1])
        assert entry["message"] == "Parsed"
        assert entry["source"] == "august.txt"

    def test_reset_logging(self):
        """Test that reset removes handlers and restores the level."""
        configure_logging(LoggingConfig(log_level="DEBUG"))
        reset_logging()

        root_logger = logging.getLogger()
        assert root_logger.handlers == []
        assert root_logger.level == logging.WARNING


class TestJSONFormatter:
    """Test JSONFormatter class."""

    def test_json_format_basic(self):
        """Test basic JSON formatting."""
        output = JSONFormatter().format(make_record())
        log_data = json.loads(output)

        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "test_logger"
        assert log_data["message"] == "Test message"
        assert log_data["line"] == 42
        assert "timestamp" in log_data

    def test_json_format_with_extra_fields(self):
        """Test JSON formatting with extra fields."""
        output = JSONFormatter().format(make_record(source="august.txt", lines=4))
        log_data = json.loads(output)

        assert log_data["source"] == "august.txt"
        assert log_data["lines"] == 4

    def test_json_format_non_serializable_extra(self):
        """Test that unknown types are rendered as strings."""
        from fractions import Fraction

        output = JSONFormatter().format(make_record(rate=Fraction(171, 2)))
        assert json.loads(output)["rate"] == "171/2"

    def test_json_format_with_exception(self):
        """Test JSON formatting with exception info."""
        try:
            raise ValueError("Test error")
        except ValueError:
            import sys

            record = make_record("Error occurred")
            record.exc_info = sys.exc_info()

        log_data = json.loads(JSONFormatter().format(record))
        assert "exception" in log_data
        assert "ValueError: Test error" in log_data["exception"]


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_returns_named_logger(self):
        logger = get_logger("tabtimetrack.readers")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "tabtimetrack.readers"
