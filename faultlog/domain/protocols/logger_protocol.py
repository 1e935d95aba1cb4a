"""LoggerProtocol definition: the logger capability a host application supplies.

faultlog never writes log records itself. It formats diagnostic text and
hands it to whichever logger the host registered at startup, so this
protocol is deliberately small: one severity plus one pre-formatted string.

Log Levels (ordered, see LogSeverity):
    - VERBOSE / DEBUG: Detailed diagnostic info (dev only)
    - INFORMATION: Normal operational events
    - WARNING: Degraded service, approaching limits
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure, immediate attention

Completion:
    ``log`` may return an awaitable (asynchronous sinks) or None
    (synchronous sinks). SafeLogger awaits the result when it is awaitable.

Usage:
    import faultlog
    from faultlog.domain.protocols.logger_protocol import LoggerProtocol

    class MyLogger:
        async def log(self, severity: LogSeverity, text: str, /) -> None:
            ...

    logger: LoggerProtocol = MyLogger()
    faultlog.set_logger(logger)
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Protocol, runtime_checkable

from faultlog.core.enums import LogSeverity


@runtime_checkable
class LoggerProtocol(Protocol):
    """Protocol for logger sinks.

    Implementations may be synchronous or asynchronous and may raise; callers
    going through SafeLogger are shielded from both.
    """

    def log(self, severity: LogSeverity, text: str, /) -> Awaitable[None] | None:
        """Write one pre-formatted log entry.

        Args:
            severity: Severity of the entry.
            text: Diagnostic text, already formatted by MessageFormatter.

        Returns:
            Awaitable[None] | None: Pending completion for async sinks.
        """
        ...
