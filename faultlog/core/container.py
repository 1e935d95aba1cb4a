"""Container module - Centralized dependency injection.

Builds the process-wide logging objects once (lru_cache singletons) and is
the only place that decides which concrete adapters are used:

- get_logger_registry(): the slot the host application configures
- get_development_logger(): ConsoleAdapter, JSON in testing/ci
- get_fallback_sink(): stdlib last-resort sink
- get_safe_logger(): SafeLogger wired to the three above

Tests call ``<factory>.cache_clear()`` to get fresh instances.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from faultlog.core.config import get_settings

if TYPE_CHECKING:
    from faultlog.domain.protocols.logger_protocol import LoggerProtocol
    from faultlog.infrastructure.logging.fallback_sink import FallbackSink
    from faultlog.infrastructure.logging.logger_registry import LoggerRegistry
    from faultlog.infrastructure.logging.safe_logger import SafeLogger


@lru_cache
def get_logger_registry() -> "LoggerRegistry":
    """Return the process-wide logger registry singleton.

    Returns:
        LoggerRegistry: Registry holding the application's logger.
    """
    from faultlog.infrastructure.logging.logger_registry import LoggerRegistry

    return LoggerRegistry()


@lru_cache
def get_development_logger() -> "LoggerProtocol":
    """Return the logger recommended for development.

    Adapter selection:
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from faultlog.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    use_json = env in {"testing", "ci"}
    return ConsoleAdapter(use_json=use_json, min_severity=settings.log_severity)


@lru_cache
def get_fallback_sink() -> "FallbackSink":
    """Return the last-resort fallback sink singleton.

    Returns:
        FallbackSink: Sink writing to the configured stdlib logger name.
    """
    from faultlog.infrastructure.logging.fallback_sink import FallbackSink

    return FallbackSink(get_settings().fallback_logger_name)


@lru_cache
def get_safe_logger() -> "SafeLogger":
    """Return the application-scoped SafeLogger singleton.

    Returns:
        SafeLogger: Never-fail logger bound to the process registry.
    """
    from faultlog.infrastructure.logging.safe_logger import SafeLogger

    return SafeLogger(
        registry=get_logger_registry(),
        fallback_sink=get_fallback_sink(),
        development_logger=get_development_logger(),
    )
