"""Argument and invariant checks that raise taxonomy faults.

Callers validate their inputs with the require_* helpers (InvalidArgumentError
on failure) and check their own internal state with assert_not_none
(AssertionFault on failure).

Usage:
    from faultlog.core.contract import require_not_none

    def set_logger(self, logger: LoggerProtocol) -> None:
        require_not_none(logger, "logger")
"""

from typing import Any

from faultlog.core.errors import AssertionFault, InvalidArgumentError


def require(condition: bool, message: str) -> None:
    """Raise InvalidArgumentError unless condition holds.

    Args:
        condition: Precondition that must be true.
        message: Explanation used when it is not.

    Raises:
        InvalidArgumentError: If condition is false.
    """
    if not condition:
        raise InvalidArgumentError(message)


def require_not_none(value: Any, name: str, message: str | None = None) -> None:
    """Raise InvalidArgumentError if value is None.

    Args:
        value: Argument to check.
        name: Parameter name, used in the default message.
        message: Optional custom message.

    Raises:
        InvalidArgumentError: If value is None.
    """
    if value is None:
        raise InvalidArgumentError(message or f"Expected '{name}' to be not None.")


def require_not_blank(value: str | None, name: str, message: str | None = None) -> None:
    """Raise InvalidArgumentError if value is None, empty or whitespace.

    Args:
        value: Text argument to check.
        name: Parameter name, used in the default message.
        message: Optional custom message.

    Raises:
        InvalidArgumentError: If value is blank.
    """
    if value is None or not value.strip():
        raise InvalidArgumentError(
            message or f"Expected '{name}' to be a non-empty string."
        )


def assert_not_none(value: Any, message: str) -> None:
    """Raise AssertionFault if an internal value is None.

    Args:
        value: Value that the calling code guarantees is set.
        message: Explanation of the broken invariant.

    Raises:
        AssertionFault: If value is None.
    """
    if value is None:
        raise AssertionFault(message)
