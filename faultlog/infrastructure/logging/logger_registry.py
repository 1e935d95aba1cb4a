"""Holder of the one logger the host application configured.

The host calls set_logger() once during startup. SafeLogger reads the
logger back on every call through get_logger(), inside its guarded path, so
a missing configuration degrades to fallback logging instead of failing the
caller.

Thread safety:
    The reference is guarded by an RLock, so reconfiguring at runtime while
    other threads log is safe. A log call racing a set_logger call observes
    either the old or the new logger, never a partial state.
"""

from __future__ import annotations

import threading

from faultlog.core.contract import require_not_none
from faultlog.core.errors import ConfigurationError
from faultlog.domain.protocols.logger_protocol import LoggerProtocol


class LoggerRegistry:
    """Single slot for the application's logger (last write wins)."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._logger: LoggerProtocol | None = None

    @property
    def is_configured(self) -> bool:
        with self._lock:
            return self._logger is not None

    def set_logger(self, logger: LoggerProtocol) -> None:
        """Configure the application logger, replacing any previous one.

        Args:
            logger: Logger implementing LoggerProtocol.

        Raises:
            InvalidArgumentError: If logger is None.
        """
        require_not_none(logger, "logger")
        with self._lock:
            self._logger = logger

    def get_logger(self) -> LoggerProtocol:
        """Return the configured logger.

        Returns:
            LoggerProtocol: The most recently configured logger.

        Raises:
            ConfigurationError: If set_logger() was never called.
        """
        with self._lock:
            logger = self._logger
        if logger is None:
            raise ConfigurationError(
                "The application must at startup call set_logger() "
                "with the appropriate LoggerProtocol implementation."
            )
        return logger

    def reset(self) -> None:
        """Return to the unconfigured state."""
        with self._lock:
            self._logger = None
