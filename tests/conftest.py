import logging

import pytest

from rocketlog.config import get_settings


@pytest.fixture(autouse=True)
def plain_settings(monkeypatch):
    """Unstyled log output so records can be compared as plain text."""
    monkeypatch.setenv("ROCKETLOG_STYLED", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def debug_caplog(caplog):
    caplog.set_level(logging.DEBUG)
    return caplog
