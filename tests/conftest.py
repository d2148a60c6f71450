import pytest

from aadhaar_verhoeff.settings import get_settings


@pytest.fixture
def fresh_settings():
    """Re-read AADHAAR_* variables set by the test, and forget them afterwards"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
