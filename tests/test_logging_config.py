"""Tests for structured logging and settings."""

import json
import logging
import sys

import pytest

from src.logging_config.config import LogFormat, LoggingConfig, LogLevel
from src.logging_config.setup import (
    ConsoleFormatter,
    StructuredFormatter,
    configure_logging,
    get_logger,
)
from src.settings import Settings, get_settings


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="src.credhub.request",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, val in extra.items():
        setattr(record, key, val)
    return record


@pytest.fixture
def root_logger():
    """Remove handlers installed by configure_logging after the test."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, (StructuredFormatter, ConsoleFormatter)):
            root.removeHandler(handler)
    root.setLevel(level)


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.service_name == "credhub-client"
        assert settings.redact_credential_values is True
        assert settings.json_indent is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CREDHUB_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CREDHUB_LOG_FORMAT", "console")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "console"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestLoggingConfig:
    def test_default_config_values(self):
        config = LoggingConfig()
        assert config.level == LogLevel.INFO
        assert config.format == LogFormat.JSON
        assert config.include_caller is True
        assert config.service_name == "credhub-client"
        assert config.redacted_fields == ["value"]

    def test_log_format_enum_values(self):
        assert LogFormat.JSON.value == "json"
        assert LogFormat.CONSOLE.value == "console"

    def test_from_settings(self):
        settings = Settings(
            log_level="debug",
            log_format="CONSOLE",
            service_name="svc",
            redact_credential_values=False,
        )
        config = LoggingConfig.from_settings(settings)
        assert config.level == LogLevel.DEBUG
        assert config.format == LogFormat.CONSOLE
        assert config.service_name == "svc"
        assert config.redacted_fields == []

    def test_from_settings_unknown_values_fall_back(self):
        config = LoggingConfig.from_settings(Settings(log_level="loud", log_format="xml"))
        assert config.level == LogLevel.INFO
        assert config.format == LogFormat.JSON


class TestStructuredFormatter:
    def test_basic_fields(self):
        entry = json.loads(StructuredFormatter(service_name="svc").format(_record()))
        assert entry["message"] == "hello"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "src.credhub.request"
        assert entry["service"] == "svc"
        assert "timestamp" in entry
        assert entry["line"] == 10

    def test_without_caller(self):
        entry = json.loads(StructuredFormatter(include_caller=False).format(_record()))
        assert "line" not in entry
        assert "function" not in entry

    def test_whitelisted_extras(self):
        record = _record(credential_name="/cred", value_type="json", permission_count=2, other="x")
        entry = json.loads(StructuredFormatter().format(record))
        assert entry["credential_name"] == "/cred"
        assert entry["value_type"] == "json"
        assert entry["permission_count"] == 2
        assert "other" not in entry

    def test_value_redacted(self):
        entry = json.loads(StructuredFormatter().format(_record(value="hunter2")))
        assert entry["value"] == "***"

    def test_redaction_disabled(self):
        formatter = StructuredFormatter(redacted_fields=())
        entry = json.loads(formatter.format(_record(value="plain")))
        assert entry["value"] == "plain"

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        entry = json.loads(StructuredFormatter().format(record))
        assert entry["exception"]["type"] == "ValueError"
        assert entry["exception"]["message"] == "boom"


class TestConsoleFormatter:
    def test_line_contains_message_and_extras(self):
        line = ConsoleFormatter().format(_record(credential_name="/cred", value="hunter2"))
        assert "src.credhub.request: hello" in line
        assert "credential_name=/cred" in line
        assert "hunter2" not in line
        assert "value=***" in line


class TestConfigureLogging:
    def test_json_handler(self, root_logger):
        configure_logging(LoggingConfig(level=LogLevel.DEBUG))
        handlers = [h for h in root_logger.handlers if isinstance(h.formatter, StructuredFormatter)]
        assert len(handlers) == 1
        assert root_logger.level == logging.DEBUG

    def test_console_handler(self, root_logger):
        configure_logging(LoggingConfig(format=LogFormat.CONSOLE, level=LogLevel.WARNING))
        assert any(isinstance(h.formatter, ConsoleFormatter) for h in root_logger.handlers)
        assert root_logger.level == logging.WARNING

    def test_reads_settings_by_default(self, root_logger, monkeypatch):
        monkeypatch.setenv("CREDHUB_LOG_FORMAT", "console")
        monkeypatch.setenv("CREDHUB_LOG_LEVEL", "ERROR")
        configure_logging()
        assert any(isinstance(h.formatter, ConsoleFormatter) for h in root_logger.handlers)
        assert root_logger.level == logging.ERROR

    def test_get_logger(self):
        assert get_logger("src.credhub") is logging.getLogger("src.credhub")
