"""
Unit tests for configuration management (FINPORT_* Settings).

Tests cover:
- Default values (no environment required)
- Settings loading from FINPORT_* environment variables
- Environment detection
- Validation (log_level)
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Environment, Settings, get_settings


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test Settings default values."""

    def test_defaults_without_environment(self):
        """Settings load with an empty environment."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.app_name == "Finport"


class TestSettingsValidation:
    """Test Settings field validation."""

    @pytest.mark.parametrize("raw", ["debug", "Warning", " error "])
    def test_log_level_normalized(self, raw):
        """Test log_level is upper-cased and stripped."""
        with patch.dict(os.environ, {"FINPORT_LOG_LEVEL": raw}, clear=True):
            settings = Settings()
        assert settings.log_level == raw.strip().upper()

    def test_log_level_invalid(self):
        """Test unknown log level raises ValidationError."""
        with patch.dict(os.environ, {"FINPORT_LOG_LEVEL": "VERBOSE"}, clear=True):
            with pytest.raises(ValidationError, match="log_level must be one of"):
                Settings()

    def test_environment_invalid(self):
        """Test unknown environment raises ValidationError."""
        with patch.dict(os.environ, {"FINPORT_ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_debug_forces_effective_level(self):
        """Test debug overrides the configured level."""
        with patch.dict(os.environ, {"FINPORT_DEBUG": "true", "FINPORT_LOG_LEVEL": "ERROR"}, clear=True):
            settings = Settings()
        assert settings.log_level == "ERROR"
        assert settings.effective_log_level == "DEBUG"


class TestEnvironmentDetection:
    """Test environment helper property."""

    @pytest.mark.parametrize(
        "env,expected",
        [
            ("development", True),
            ("testing", False),
            ("ci", False),
            ("production", False),
        ],
    )
    def test_is_development(self, env, expected):
        with patch.dict(os.environ, {"FINPORT_ENVIRONMENT": env}, clear=True):
            settings = Settings()

        assert settings.is_development is expected


class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self):
        """Test get_settings returns the same instance until cache_clear."""
        with patch.dict(os.environ, {"FINPORT_APP_NAME": "Cached"}, clear=True):
            get_settings.cache_clear()
            first = get_settings()
            second = get_settings()

        assert first is second
        assert first.app_name == "Cached"
        get_settings.cache_clear()
