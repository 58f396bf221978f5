"""Root conftest — shared test configuration."""

import pytest

from matrixmath.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test reads settings from its own (monkeypatched) environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
