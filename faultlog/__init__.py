"""faultlog: classified faults and never-fail logging.

Host applications configure a logger once at startup and can then log from
anywhere without wrapping the call in their own error handling:

    import faultlog
    from faultlog import LogSeverity

    faultlog.set_logger(MyLogger())

    try:
        ...
    except Exception as e:
        await faultlog.log_async(LogSeverity.ERROR, "Import failed", e)
"""

from faultlog.core.container import get_logger_registry, get_safe_logger
from faultlog.core.correlation import correlation_scope, get_correlation_id
from faultlog.core.enums import FaultType, LogSeverity
from faultlog.core.errors import (
    AssertionFault,
    ConfigurationError,
    ConflictError,
    ContractError,
    FaultError,
    InvalidArgumentError,
    NotFoundError,
    TimeoutFault,
    UnauthorizedError,
)
from faultlog.domain.protocols.logger_protocol import LoggerProtocol
from faultlog.infrastructure.logging.message_formatter import (
    format_chain,
    format_message,
)

__version__ = "0.1.0"


def set_logger(logger: LoggerProtocol) -> None:
    """Configure the application logger (call once at startup).

    Args:
        logger: Logger implementing LoggerProtocol. Replaces any previous one.

    Raises:
        InvalidArgumentError: If logger is None.
    """
    get_logger_registry().set_logger(logger)


async def log_async(
    severity: LogSeverity, message: str | None, error: BaseException | None = None
) -> None:
    """Log through the process SafeLogger. Never raises.

    Args:
        severity: Severity of the entry.
        message: Message to log. Can be None if error is given.
        error: Optional error; its cause chain is rendered.
    """
    await get_safe_logger().log(severity, message, error)


__all__ = [
    "AssertionFault",
    "ConfigurationError",
    "ConflictError",
    "ContractError",
    "FaultError",
    "FaultType",
    "InvalidArgumentError",
    "LogSeverity",
    "LoggerProtocol",
    "NotFoundError",
    "TimeoutFault",
    "UnauthorizedError",
    "correlation_scope",
    "format_chain",
    "format_message",
    "get_correlation_id",
    "log_async",
    "set_logger",
]
