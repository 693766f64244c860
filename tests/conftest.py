"""
Pytest configuration and fixtures.
"""

import os
from unittest.mock import patch

import pytest

from tests.helpers import make_page, make_segment


@pytest.fixture(autouse=True)
def mock_env_vars():
    """Mock environment variables for tests."""
    env_vars = {
        "LOG_LEVEL": "DEBUG",
        "FETCH_TIMEOUT_SECONDS": "5",
    }

    with patch.dict(os.environ, env_vars):
        # Clear config cache
        from src.lunchguide.config import get_config
        get_config.cache_clear()
        yield
        get_config.cache_clear()


@pytest.fixture
def two_restaurant_page() -> str:
    """A known restaurant followed by one missing from the name table."""
    return make_page(
        make_segment("lunchlogo/club-etage.gif", ["Köttbullar", "Fisk"], caption="Pris 75:-"),
        make_segment("lunchlogo/nyoppnat-stalle.gif", ["Pasta"]),
    )
