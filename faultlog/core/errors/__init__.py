"""Core errors package.

Exports all fault kinds for convenient importing.

Usage:
    from faultlog.core.errors import FaultError, ContractError, NotFoundError
"""

from faultlog.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    TimeoutFault,
    UnauthorizedError,
)
from faultlog.core.errors.contract_errors import (
    AssertionFault,
    ConfigurationError,
    ContractError,
    InvalidArgumentError,
)
from faultlog.core.errors.fault_error import FaultError

__all__ = [
    "FaultError",
    "ContractError",
    "InvalidArgumentError",
    "ConfigurationError",
    "AssertionFault",
    "NotFoundError",
    "ConflictError",
    "UnauthorizedError",
    "TimeoutFault",
]
