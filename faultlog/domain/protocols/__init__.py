"""Domain protocols (ports).

Usage:
    from faultlog.domain.protocols import LoggerProtocol
"""

from faultlog.domain.protocols.create_protocol import (
    CreateProtocol,
    OptimisticConcurrencyControlled,
    StorableItem,
)
from faultlog.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "LoggerProtocol",
    "CreateProtocol",
    "StorableItem",
    "OptimisticConcurrencyControlled",
]
