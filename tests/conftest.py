"""Pytest configuration for all tests."""

import pytest
import structlog

from cwfilter.core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings_and_logging():
    """Reload settings and reset structlog around every test.

    Settings are cached and the CLI reconfigures structlog globally, so
    neither may leak from one test into the next.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
