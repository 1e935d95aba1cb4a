"""Core shared kernel.

This module provides foundational pieces used across all layers:
- Fault taxonomy (FaultError and its kinds)
- Result types for railway-oriented programming
- Correlation id context and argument contracts

The core module has NO dependencies on other faultlog layers.
"""

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
from faultlog.core.result import Failure, Result, Success

__all__ = [
    "AssertionFault",
    "ConfigurationError",
    "ConflictError",
    "ContractError",
    "Failure",
    "FaultError",
    "FaultType",
    "InvalidArgumentError",
    "LogSeverity",
    "NotFoundError",
    "Result",
    "Success",
    "TimeoutFault",
    "UnauthorizedError",
]
