import os
import sys

import pytest

# Add the project root to the path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from landing_check.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test see the environment it sets up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings pointing at a local address, never read from the environment."""
    return Settings(base_url="http://localhost:3000", timeout_ms=5_000)
