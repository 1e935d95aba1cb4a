"""Unit tests for ConsoleAdapter (development logger).

Tests cover:
- LoggerProtocol.log() mapping of every severity to a structlog method
- Minimum severity filtering
- Private structlog logger (JSON vs console renderer)
- Global structlog configuration is left to the host application

Architecture:
- Unit tests with mocked structlog
- Isolation tests write real output to captured stdout
"""

from unittest.mock import MagicMock, patch

import pytest
import structlog

from faultlog.core.enums import LogSeverity
from faultlog.domain.protocols.logger_protocol import LoggerProtocol
from faultlog.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter.log()."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("severity", "method"),
        [
            (LogSeverity.DEBUG, "debug"),
            (LogSeverity.INFORMATION, "info"),
            (LogSeverity.WARNING, "warning"),
            (LogSeverity.ERROR, "error"),
            (LogSeverity.CRITICAL, "critical"),
        ],
    )
    async def test_log_calls_matching_structlog_method(self, severity, method):
        """Test each severity is written with the matching structlog method."""
        with patch("faultlog.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.wrap_logger.return_value = mock_logger

            adapter = ConsoleAdapter(min_severity=LogSeverity.VERBOSE)
            await adapter.log(severity, "Disk full")

            getattr(mock_logger, method).assert_called_once_with(
                "Disk full", severity=severity.name
            )

    @pytest.mark.asyncio
    async def test_verbose_maps_to_debug(self):
        """Test VERBOSE entries are written at debug level."""
        with patch("faultlog.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.wrap_logger.return_value = mock_logger

            adapter = ConsoleAdapter(min_severity=LogSeverity.VERBOSE)
            await adapter.log(LogSeverity.VERBOSE, "Cache miss")

            mock_logger.debug.assert_called_once_with("Cache miss", severity="VERBOSE")

    @pytest.mark.asyncio
    async def test_entries_below_min_severity_are_dropped(self):
        """Test severities below the minimum are not written."""
        with patch("faultlog.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.wrap_logger.return_value = mock_logger

            adapter = ConsoleAdapter(min_severity=LogSeverity.WARNING)
            await adapter.log(LogSeverity.INFORMATION, "Started")
            await adapter.log(LogSeverity.WARNING, "Slow")

            mock_logger.info.assert_not_called()
            mock_logger.warning.assert_called_once_with("Slow", severity="WARNING")

    @pytest.mark.asyncio
    async def test_special_characters_pass_through(self):
        """Test multi-line diagnostic text is written unchanged."""
        with patch("faultlog.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.wrap_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            text = "Exception type: builtins.ValueError\n--Inner exception--\n\t\"x\""
            await adapter.log(LogSeverity.ERROR, text)

            mock_logger.error.assert_called_once_with(text, severity="ERROR")


@pytest.mark.unit
class TestConsoleAdapterInitialization:
    """Test ConsoleAdapter initialization and configuration."""

    def test_adapter_wraps_private_logger(self):
        """Test ConsoleAdapter wraps its own logger instead of configuring structlog."""
        with patch("faultlog.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.wrap_logger.return_value = mock_logger

            adapter = ConsoleAdapter()

            mock_structlog.configure.assert_not_called()
            mock_structlog.wrap_logger.assert_called_once()
            assert adapter._logger == mock_logger

    def test_json_renderer_when_use_json(self):
        """Test JSON rendering is selected for testing/CI."""
        with patch("faultlog.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self):
        """Test human-readable rendering is the default."""
        with patch("faultlog.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
            mock_structlog.processors.JSONRenderer.assert_not_called()

    def test_filter_level_never_below_debug(self):
        """Test VERBOSE minimum is clamped to structlog's DEBUG level."""
        with patch("faultlog.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            ConsoleAdapter(min_severity=LogSeverity.VERBOSE)

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(10)

    def test_satisfies_logger_protocol(self):
        """Test ConsoleAdapter structurally implements LoggerProtocol."""
        with patch("faultlog.infrastructure.logging.console_adapter.structlog"):
            adapter = ConsoleAdapter()

            assert isinstance(adapter, LoggerProtocol)


@pytest.fixture
def host_structlog_config():
    """Host application structlog setup, restored to defaults afterwards."""

    def host_processor(logger, method_name, event_dict):
        return event_dict

    structlog.configure(
        processors=[host_processor, structlog.processors.JSONRenderer()],
        cache_logger_on_first_use=False,
    )
    yield host_processor
    structlog.reset_defaults()


@pytest.mark.unit
class TestConsoleAdapterIsolation:
    """Test ConsoleAdapter leaves global structlog state alone."""

    @pytest.mark.asyncio
    async def test_host_configuration_is_untouched(self, host_structlog_config, capsys):
        """Test building and using an adapter keeps the host's processors."""
        before = structlog.get_config()

        adapter = ConsoleAdapter(use_json=True)
        await adapter.log(LogSeverity.ERROR, "Disk full")

        assert structlog.get_config() == before
        assert host_structlog_config in structlog.get_config()["processors"]
        assert "Disk full" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_adapters_filter_independently(self, capsys):
        """Test a second adapter's minimum does not silence the first."""
        verbose = ConsoleAdapter(use_json=True, min_severity=LogSeverity.DEBUG)
        quiet = ConsoleAdapter(use_json=True, min_severity=LogSeverity.ERROR)

        await verbose.log(LogSeverity.DEBUG, "cache warmed")
        await quiet.log(LogSeverity.DEBUG, "cache cold")

        out = capsys.readouterr().out
        assert "cache warmed" in out
        assert "cache cold" not in out
