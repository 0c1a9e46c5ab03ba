"""Shared fixtures for the fieldrules test suite."""

import logging
import os

import pytest
import structlog

from fieldrules.config import get_settings
from fieldrules.logging import LoggerRegistry


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from FIELDRULES_* variables and the settings cache."""
    for key in list(os.environ):
        if key.startswith("FIELDRULES_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_logging():
    """Restore structlog defaults and the root logger after a test configures logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    LoggerRegistry._loggers.clear()
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    LoggerRegistry._loggers.clear()
    root.handlers, root.level = handlers, level
