"""Result types for railway-oriented programming.

The safe logging path uses these to make its two tiers explicit: the primary
attempt returns a Result instead of raising, and the caller decides whether
the fallback tier runs.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure(error="Division by zero")
        return Success(value=a / b)

    match divide(10, 2):
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result = Success[T] | Failure[E]
