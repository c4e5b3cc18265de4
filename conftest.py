import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def _isolated_state(settings, tmp_path):
    """Fresh cache (throttles, news pages) and a throwaway media root per test."""
    settings.MEDIA_ROOT = tmp_path
    cache.clear()
    yield
    cache.clear()
