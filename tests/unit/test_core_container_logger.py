"""Unit tests for get_logger() container function.

Tests cover:
- Renderer selection from Settings.is_development
- Level taken from Settings.effective_log_level
- app/version bound into every log line
- Singleton pattern (same instance returned)

Architecture:
- Unit tests with mocked settings and adapters
- Tests centralized dependency injection pattern
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from src.core.container import get_logger


def configure_settings(
    mock_settings: MagicMock,
    *,
    is_development: bool = True,
    level: str = "INFO",
) -> None:
    """Populate the fields get_logger() reads from settings."""
    mock_settings.is_development = is_development
    mock_settings.effective_log_level = level
    mock_settings.app_name = "Finport"
    mock_settings.app_version = "1.2.3"


@pytest.mark.unit
class TestGetLoggerContainer:
    """Test get_logger() container function."""

    def test_get_logger_uses_console_renderer_in_development(self):
        """Test get_logger() configures human-readable output in development."""
        with patch("src.core.container.infrastructure.settings") as mock_settings:
            configure_settings(mock_settings, is_development=True)

            # Clear cache to force new call
            get_logger.cache_clear()

            with patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                get_logger()

                mock_console.assert_called_once_with(use_json=False, level="INFO")

    def test_get_logger_uses_json_outside_development(self):
        """Test get_logger() configures JSON output for non-dev environments."""
        with patch("src.core.container.infrastructure.settings") as mock_settings:
            configure_settings(mock_settings, is_development=False, level="WARNING")

            get_logger.cache_clear()

            with patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                get_logger()

                mock_console.assert_called_once_with(use_json=True, level="WARNING")

    def test_get_logger_uses_effective_log_level(self):
        """Test the debug override resolved by Settings reaches the adapter."""
        with patch("src.core.container.infrastructure.settings") as mock_settings:
            configure_settings(mock_settings, level="DEBUG")

            get_logger.cache_clear()

            with patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                get_logger()

                assert mock_console.call_args.kwargs["level"] == "DEBUG"

    def test_get_logger_binds_app_metadata(self):
        """Test get_logger() returns the adapter bound with app and version."""
        with patch("src.core.container.infrastructure.settings") as mock_settings:
            configure_settings(mock_settings)

            get_logger.cache_clear()

            with patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                adapter = mock_console.return_value
                logger = get_logger()

                adapter.bind.assert_called_once_with(app="Finport", version="1.2.3")
                assert logger is adapter.bind.return_value

    def test_get_logger_returns_singleton(self):
        """Test get_logger() returns same instance on multiple calls."""
        with patch("src.core.container.infrastructure.settings") as mock_settings:
            configure_settings(mock_settings)

            get_logger.cache_clear()

            with patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                logger1 = get_logger()
                logger2 = get_logger()

                assert logger1 is logger2
                mock_console.assert_called_once()


@pytest.mark.unit
class TestGetLoggerOutput:
    """Test the JSON lines produced by the real adapter."""

    def test_json_line_carries_app_and_version(self, capsys):
        """Test every emitted line includes the bound app metadata."""
        with patch("src.core.container.infrastructure.settings") as mock_settings:
            configure_settings(mock_settings, is_development=False)

            get_logger.cache_clear()
            get_logger().info("portfolio_renamed", portfolio_id="p-1")

        line = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert line["event"] == "portfolio_renamed"
        assert line["app"] == "Finport"
        assert line["version"] == "1.2.3"
        assert line["portfolio_id"] == "p-1"
        assert line["level"] == "info"
