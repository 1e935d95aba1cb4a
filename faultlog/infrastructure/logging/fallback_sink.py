"""Last-resort synchronous text sink.

Used by SafeLogger only after the configured logger failed or was missing.
Writes through a stdlib ``logging`` logger so the entry lands wherever the
host routed its root logger (stderr by default, via ``logging.lastResort``).
"""

from __future__ import annotations

import logging


class FallbackSink:
    """Writes plain text at CRITICAL level to a named stdlib logger.

    Args:
        logger_name (str): Name of the stdlib logger to write to.
    """

    def __init__(self, logger_name: str = "faultlog.fallback") -> None:
        self._logger = logging.getLogger(logger_name)

    @property
    def name(self) -> str:
        return self._logger.name

    def emit(self, text: str) -> None:
        """Write one line of text.

        Args:
            text (str): Text to write.
        """
        self._logger.critical(text)
