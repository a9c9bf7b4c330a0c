"""Structured Logging.

JSON or console log output for the CredHub client, with credential
values masked in structured records.
"""

from src.logging_config.config import LogFormat, LoggingConfig, LogLevel
from src.logging_config.setup import (
    ConsoleFormatter,
    StructuredFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "ConsoleFormatter",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
]
