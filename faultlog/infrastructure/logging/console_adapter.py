"""Console logging adapter (development/testing).

The logger recommended while developing an application, and the second tier
of SafeLogger's fallback path. Outputs to stdout using structlog:
- Development: human-readable console renderer with colors
- Testing/CI: JSON renderer for machine parsing

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping). Any object with the same call signature is compatible
with LoggerProtocol.
"""

from __future__ import annotations

import sys

import structlog

from faultlog.core.enums import LogSeverity

_METHOD_BY_SEVERITY: dict[LogSeverity, str] = {
    LogSeverity.VERBOSE: "debug",
    LogSeverity.DEBUG: "debug",
    LogSeverity.INFORMATION: "info",
    LogSeverity.WARNING: "warning",
    LogSeverity.ERROR: "error",
    LogSeverity.CRITICAL: "critical",
}


class ConsoleAdapter:
    """Console logger for development and testing environments.

    Args:
        use_json (bool): JSON output when True (CI/testing), human-readable when False (dev).
        min_severity (LogSeverity): Entries below this severity are dropped.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        min_severity: LogSeverity = LogSeverity.INFORMATION,
    ) -> None:
        """Initialize the console adapter.

        Args:
            use_json (bool): JSON output when True (CI/testing), human-readable when False (dev).
            min_severity (LogSeverity): Entries below this severity are dropped.
        """
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        self._min_severity = min_severity
        # Private logger: structlog.configure() belongs to the host application.
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=sys.stdout),
            processors=processors,
            # VERBOSE (5) is below every structlog level; filter at DEBUG instead.
            wrapper_class=structlog.make_filtering_bound_logger(
                max(int(min_severity), int(LogSeverity.DEBUG))
            ),
            context_class=dict,
        )

    async def log(self, severity: LogSeverity, text: str, /) -> None:
        """Log one pre-formatted entry.

        Args:
            severity (LogSeverity): Entry severity.
            text (str): Message text.
        """
        if severity < self._min_severity:
            return
        method = getattr(self._logger, _METHOD_BY_SEVERITY[severity])
        method(text, severity=severity.name)

