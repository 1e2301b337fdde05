"""Shared test fixtures for exception-factory test suite."""

import logging

import pytest
import structlog

from exception_factory.application import capabilities
from exception_factory.infrastructure.config import get_settings


@pytest.fixture
def root_cause():
    """An exception to chain as a cause."""
    return OSError("disk unavailable")


@pytest.fixture(autouse=True)
def isolated_factory_registry():
    """Keep register_factory() calls from leaking between tests."""
    saved = dict(capabilities._FACTORIES)
    yield capabilities._FACTORIES
    capabilities._FACTORIES.clear()
    capabilities._FACTORIES.update(saved)


@pytest.fixture
def fresh_settings():
    """Reload settings from the environment the test sets up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    """Undo configure_logging() side effects on structlog and the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
