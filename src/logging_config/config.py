"""Logging Configuration.

Log levels, output formats and the fields masked in structured output.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from src.settings import Settings


class LogLevel(str, Enum):
    """Log level options."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


# Extra record attributes copied into structured output. "value" is only
# set by callers on their own records and is masked by default.
EXTRA_FIELDS = (
    "credential_name",
    "value_type",
    "permission_count",
    "operation_count",
    "actor",
    "value",
)

REDACTED = "***"


@dataclass
class LoggingConfig:
    """Structured logging configuration.

    The builders never log credential values. ``value`` is whitelisted and
    masked so that callers who attach one to their own records through
    ``extra`` do not leak it.
    """

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    include_caller: bool = True
    service_name: str = "credhub-client"
    redacted_fields: List[str] = field(default_factory=lambda: ["value"])

    @classmethod
    def from_settings(cls, settings: "Settings") -> "LoggingConfig":
        """Build a config from environment-driven settings.

        Unknown level or format names fall back to the defaults.
        """
        level_name = settings.log_level.upper()
        level = LogLevel(level_name) if level_name in LogLevel.__members__ else LogLevel.INFO

        format_name = settings.log_format.lower()
        formats = {f.value: f for f in LogFormat}
        log_format = formats.get(format_name, LogFormat.JSON)

        return cls(
            level=level,
            format=log_format,
            include_caller=settings.log_include_caller,
            service_name=settings.service_name,
            redacted_fields=["value"] if settings.redact_credential_values else [],
        )


DEFAULT_LOGGING_CONFIG = LoggingConfig()
