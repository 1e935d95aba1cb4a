"""Log severity levels (ordered).

Numeric values line up with the stdlib ``logging`` levels so a severity can
be handed to any stdlib-compatible sink unchanged. VERBOSE sits below DEBUG.
"""

from enum import IntEnum


class LogSeverity(IntEnum):
    """Ordered log severity, lowest to highest."""

    VERBOSE = 5
    DEBUG = 10
    INFORMATION = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
