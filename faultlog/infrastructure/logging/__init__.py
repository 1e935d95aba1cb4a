"""Logging infrastructure.

Usage:
    from faultlog.infrastructure.logging import SafeLogger, format_chain
"""

from faultlog.infrastructure.logging.console_adapter import ConsoleAdapter
from faultlog.infrastructure.logging.fallback_sink import FallbackSink
from faultlog.infrastructure.logging.logger_registry import LoggerRegistry
from faultlog.infrastructure.logging.message_formatter import (
    CYCLE_MARKER,
    INNER_MARKER,
    format_chain,
    format_message,
)
from faultlog.infrastructure.logging.safe_logger import SafeLogger

__all__ = [
    "ConsoleAdapter",
    "FallbackSink",
    "LoggerRegistry",
    "SafeLogger",
    "format_chain",
    "format_message",
    "INNER_MARKER",
    "CYCLE_MARKER",
]
