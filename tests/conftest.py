"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop cached settings so each test sees its own environment."""
    from src.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
