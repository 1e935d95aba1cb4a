"""Common fault kinds used across all callers.

These faults describe the outcome of an operation rather than a programming
mistake. Only TimeoutFault is worth retrying unchanged.

Error Types:
- NotFoundError: Resource not found
- ConflictError: Resource conflict (duplicate, stale version)
- UnauthorizedError: Caller is not authenticated or not allowed
- TimeoutFault: Operation did not finish in time

Usage:
    from faultlog.core.errors import NotFoundError

    raise NotFoundError(f"No item with id {item_id}")
"""

from faultlog.core.enums import FaultType
from faultlog.core.errors.fault_error import FaultError


class NotFoundError(FaultError):
    """The requested resource does not exist."""

    type_discriminator = FaultType.NOT_FOUND
    retry_meaningful = False
    friendly_template = "The requested item could not be found."


class ConflictError(FaultError):
    """The request conflicts with the current state of the resource."""

    type_discriminator = FaultType.CONFLICT
    retry_meaningful = False
    friendly_template = (
        "The item was changed by someone else, or already exists. "
        "Reload it and try the change again."
    )


class UnauthorizedError(FaultError):
    """The caller is not authenticated, or lacks permission."""

    type_discriminator = FaultType.UNAUTHORIZED
    retry_meaningful = False
    friendly_template = "You are not allowed to perform this operation."


class TimeoutFault(FaultError):
    """The operation did not complete in time; it may succeed if retried."""

    type_discriminator = FaultType.TIMEOUT
    retry_meaningful = True
    friendly_template = "The operation took too long. Please try again later."
