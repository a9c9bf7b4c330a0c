"""Logging Setup.

One-call configuration for the library's loggers. JSON output for
services, colored console lines for local development.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from src.logging_config.config import EXTRA_FIELDS, REDACTED, LogFormat, LoggingConfig
from src.settings import get_settings


def _extra_fields(record: logging.LogRecord, redacted: Iterable[str]) -> Dict[str, Any]:
    redacted = set(redacted)
    extras = {}
    for key in EXTRA_FIELDS:
        if hasattr(record, key):
            extras[key] = REDACTED if key in redacted else getattr(record, key)
    return extras


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter.

    One JSON object per line: timestamp, level, logger, message, service,
    plus any whitelisted extras bound to the record.
    """

    def __init__(
        self,
        service_name: str = "credhub-client",
        include_caller: bool = True,
        redacted_fields: Iterable[str] = ("value",),
    ):
        super().__init__()
        self.service_name = service_name
        self.include_caller = include_caller
        self.redacted_fields = tuple(redacted_fields)

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
        }

        if self.include_caller:
            log_entry["module"] = record.module
            log_entry["function"] = record.funcName
            log_entry["line"] = record.lineno

        log_entry.update(_extra_fields(record, self.redacted_fields))

        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for development."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, redacted_fields: Iterable[str] = ("value",)):
        super().__init__()
        self.redacted_fields = tuple(redacted_fields)

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.now(timezone.utc).strftime("%H:%M:%S.%f")[:-3]

        extras = _extra_fields(record, self.redacted_fields)
        extras_str = ""
        if extras:
            extras_str = " [" + ", ".join(f"{k}={v}" for k, v in extras.items()) + "]"

        line = (
            f"{color}{timestamp} {record.levelname:8s}{self.RESET} "
            f"{record.name}: {record.getMessage()}{extras_str}"
        )

        if record.exc_info and record.exc_info[0] is not None:
            line += "\n" + self.formatException(record.exc_info)

        return line


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure logging for the CredHub client.

    Call once at application startup. Without an explicit config the
    level and format come from the CREDHUB_* environment settings.
    """
    config = config or LoggingConfig.from_settings(get_settings())

    if config.format == LogFormat.JSON:
        formatter = StructuredFormatter(
            service_name=config.service_name,
            include_caller=config.include_caller,
            redacted_fields=config.redacted_fields,
        )
    else:
        formatter = ConsoleFormatter(redacted_fields=config.redacted_fields)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, config.level.value))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance, typically for ``__name__``."""
    return logging.getLogger(name)
