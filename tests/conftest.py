"""Pytest configuration shared by all test modules.

Provides a settings reset between tests so cached settings/logger
singletons created under one patched environment do not leak into the next.
"""

import pytest

from src.core.config import get_settings
from src.core.container import get_logger


@pytest.fixture(autouse=True)
def reset_cached_singletons():
    """Clear cached settings and logger after each test."""
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
