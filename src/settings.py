"""Centralized settings for the CredHub client core.

Uses pydantic-settings to load from environment variables (prefixed CREDHUB_)
with defaults suitable for local development.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # --- Logging ---
    log_level: str = "INFO"
    log_format: str = "json"  # json | console
    log_include_caller: bool = True
    service_name: str = "credhub-client"
    redact_credential_values: bool = True

    # --- Payload rendering ---
    json_indent: Optional[int] = None

    model_config = {
        "env_prefix": "CREDHUB_",
        "env_file": ".env",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton."""
    return Settings()
