"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Container singletons are rebuilt for every test (no shared registry state)
2. Loggers used as test doubles record calls in order
3. SafeLogger instances are wired with isolated collaborators
"""

from unittest.mock import MagicMock

import pytest

from faultlog.core.container import (
    get_development_logger,
    get_fallback_sink,
    get_logger_registry,
    get_safe_logger,
)
from faultlog.infrastructure.logging.fallback_sink import FallbackSink
from faultlog.infrastructure.logging.logger_registry import LoggerRegistry
from faultlog.infrastructure.logging.safe_logger import SafeLogger
from tests.utils.loggers import RecordingLogger


@pytest.fixture(autouse=True)
def reset_container():
    """Clear lru_cache singletons before and after each test."""
    factories = (
        get_logger_registry,
        get_development_logger,
        get_fallback_sink,
        get_safe_logger,
    )
    for factory in factories:
        factory.cache_clear()
    yield
    for factory in factories:
        factory.cache_clear()


@pytest.fixture
def registry():
    """Fresh, unconfigured logger registry."""
    return LoggerRegistry()


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def development_logger():
    """Recording stand-in for the development logger (fallback tier 2)."""
    return RecordingLogger()


@pytest.fixture
def fallback_sink():
    """Mock fallback sink; inspect ``emit.call_args_list``."""
    return MagicMock(spec=FallbackSink)


@pytest.fixture
def safe_logger(registry, fallback_sink, development_logger):
    """SafeLogger wired to isolated collaborators."""
    return SafeLogger(
        registry=registry,
        fallback_sink=fallback_sink,
        development_logger=development_logger,
    )
