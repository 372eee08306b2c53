"""Pytest configuration and fixtures for all tests."""

import pytest

from flightcalc.core.config import LOG_CONFIG_ENV
from flightcalc.core.logging_system import shutdown_logging


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch: pytest.MonkeyPatch):
    """Ignore any user logging config and reset logging after each test."""
    monkeypatch.delenv(LOG_CONFIG_ENV, raising=False)
    yield
    shutdown_logging()
