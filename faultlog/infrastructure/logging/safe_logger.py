"""Safe logging: format, dispatch, and fall back without ever raising.

SafeLogger.log() is the only entry point application code needs. It runs two
tiers:

1. Primary: format the message/error, fetch the configured logger from the
   registry, call its ``log`` and await the completion if there is one. The
   outcome is a Result instead of an exception.
2. Fallback (only on Failure): emit a description of what went wrong, then
   the original message, to the fallback sink and to the development logger.
   Each emission is guarded on its own and any failure there is discarded.

Nothing is retried at this layer. Only ``Exception`` subclasses are absorbed;
``asyncio.CancelledError`` and other ``BaseException``s still propagate so
task cancellation keeps working.

Usage:
    from faultlog.core.container import get_safe_logger

    logger = get_safe_logger()
    await logger.error("Import failed", error=e)
"""

from __future__ import annotations

import inspect
from collections.abc import Callable

from faultlog.core.enums import LogSeverity
from faultlog.core.result import Failure, Result, Success
from faultlog.domain.protocols.logger_protocol import LoggerProtocol
from faultlog.infrastructure.logging.fallback_sink import FallbackSink
from faultlog.infrastructure.logging.logger_registry import LoggerRegistry
from faultlog.infrastructure.logging.message_formatter import (
    format_chain,
    format_message,
    safe_str,
)

NO_MESSAGE = "(no message or error was given to log)"


class SafeLogger:
    """Never-fail logger in front of the application's configured logger.

    Args:
        registry (LoggerRegistry): Source of the configured logger.
        fallback_sink (FallbackSink): Synchronous last-resort sink.
        development_logger (LoggerProtocol): Second fallback target, written
            to at CRITICAL severity.
    """

    def __init__(
        self,
        *,
        registry: LoggerRegistry,
        fallback_sink: FallbackSink,
        development_logger: LoggerProtocol,
    ) -> None:
        self._registry = registry
        self._fallback_sink = fallback_sink
        self._development_logger = development_logger

    async def log(
        self,
        severity: LogSeverity,
        message: str | None,
        error: BaseException | None = None,
    ) -> None:
        """Log a message and/or error. Never raises.

        Args:
            severity (LogSeverity): Severity of the entry.
            message (str | None): Message to log. Ignored for formatting when
                error is given, but still used by the fallback path.
            error (BaseException | None): Optional error; its full cause chain
                is rendered.
        """
        result = await self._deliver(severity, message, error)
        match result:
            case Failure(error=failure):
                await self._fall_back(failure, message, error)
            case Success():
                pass

    async def critical(
        self, message: str | None, error: BaseException | None = None
    ) -> None:
        await self.log(LogSeverity.CRITICAL, message, error)

    async def error(
        self, message: str | None, error: BaseException | None = None
    ) -> None:
        await self.log(LogSeverity.ERROR, message, error)

    async def warning(
        self, message: str | None, error: BaseException | None = None
    ) -> None:
        await self.log(LogSeverity.WARNING, message, error)

    async def information(
        self, message: str | None, error: BaseException | None = None
    ) -> None:
        await self.log(LogSeverity.INFORMATION, message, error)

    async def debug(
        self, message: str | None, error: BaseException | None = None
    ) -> None:
        await self.log(LogSeverity.DEBUG, message, error)

    async def _deliver(
        self,
        severity: LogSeverity,
        message: str | None,
        error: BaseException | None,
    ) -> Result[None, Exception]:
        try:
            text = format_message(message, error)
            logger = self._registry.get_logger()
            await _complete(logger.log(severity, text))
        except Exception as e:
            return Failure(error=e)
        return Success(value=None)

    async def _fall_back(
        self,
        failure: Exception,
        message: str | None,
        error: BaseException | None,
    ) -> None:
        # Internal failure first, then the entry the caller asked for.
        await self._emit_fallback(lambda: _describe_failure(failure))
        await self._emit_fallback(lambda: _original_text(message, error))

    async def _emit_fallback(self, build_text: Callable[[], str]) -> None:
        try:
            text = build_text()
            self._fallback_sink.emit(text)
            await _complete(self._development_logger.log(LogSeverity.CRITICAL, text))
        except Exception:
            # The fallback path must never fail.
            pass


async def _complete(completion: object) -> None:
    if inspect.isawaitable(completion):
        await completion


def _describe_failure(failure: Exception) -> str:
    return f"Logging failed with {type(failure).__name__}: {safe_str(failure)}"


def _original_text(message: str | None, error: BaseException | None) -> str:
    if message is not None and message.strip():
        return message
    if error is not None:
        return format_chain(error)
    return NO_MESSAGE
