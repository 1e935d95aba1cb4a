"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from faultlog.core.enums import Environment, FaultType, LogSeverity
"""

from faultlog.core.enums.environment import Environment
from faultlog.core.enums.fault_type import FaultType
from faultlog.core.enums.log_severity import LogSeverity

__all__ = ["Environment", "FaultType", "LogSeverity"]
