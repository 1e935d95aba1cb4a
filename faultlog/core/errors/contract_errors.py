"""Programmer-misuse faults.

These faults mean code called another part of the program the wrong way or
the host application skipped a setup step. Retrying the same call unchanged
can never succeed, and an end user should never see them raw.

Error Types:
- ContractError: Caller passed malformed input or broke a call sequence
- InvalidArgumentError: A required argument was missing or blank
- ConfigurationError: A facility was used before the host configured it
- AssertionFault: An internal invariant of this library was broken

Usage:
    from faultlog.core.errors import ContractError

    raise ContractError("page_size must be positive")
"""

from faultlog.core.enums import FaultType
from faultlog.core.errors.fault_error import FaultError

_PROGRAMMER_ERROR = (
    "A programmer's code calls another part of the program in a bad way. "
    "An end user is never supposed to see this error as it should be "
    "converted on the way."
)


class ContractError(FaultError):
    """Bad request to a component: syntax, values out of range, call order."""

    type_discriminator = FaultType.CONTRACT
    retry_meaningful = False
    friendly_template = _PROGRAMMER_ERROR


class InvalidArgumentError(FaultError):
    """A required argument was None or blank."""

    type_discriminator = FaultType.INVALID_ARGUMENT
    retry_meaningful = False
    friendly_template = _PROGRAMMER_ERROR


class ConfigurationError(FaultError):
    """A facility was consulted before the host application configured it."""

    type_discriminator = FaultType.CONFIGURATION
    retry_meaningful = False
    friendly_template = (
        "The application was not set up correctly at startup. "
        "An end user is never supposed to see this error as it should be "
        "converted on the way."
    )


class AssertionFault(FaultError):
    """An internal invariant did not hold (a bug in the called code)."""

    type_discriminator = FaultType.ASSERTION
    retry_meaningful = False
    friendly_template = (
        "An internal consistency check failed, which means there is a bug "
        "in the program."
    )
