"""Stable type discriminators for the fault taxonomy (machine-readable).

Each FaultError kind is bound to exactly one member. External systems
classify failures by the string value, never by Python class identity, so
values must not change once published.

Categories:
- Caller misuse (CONTRACT, INVALID_ARGUMENT)
- Host misconfiguration (CONFIGURATION)
- Broken internal invariants (ASSERTION)
- Resource errors (NOT_FOUND, CONFLICT)
- Access errors (UNAUTHORIZED)
- Transient errors (TIMEOUT)
"""

from enum import Enum


class FaultType(str, Enum):
    """Fault type discriminators (snake_case values)."""

    CONTRACT = "contract"
    INVALID_ARGUMENT = "invalid_argument"
    CONFIGURATION = "configuration"
    ASSERTION = "assertion"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    TIMEOUT = "timeout"
