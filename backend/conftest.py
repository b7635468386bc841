import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def _reset_throttle_cache():
    """Throttle counters live in the local-memory cache; start each test clean."""
    cache.clear()
    yield
    cache.clear()
