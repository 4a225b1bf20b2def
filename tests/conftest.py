import pytest

from assertive.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env overrides in a test stay in that test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
