"""Tests for settings."""

import pytest

from correlation_vector.models.config import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_validation_is_off_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CV_VALIDATE_DURING_CREATION", raising=False)
        assert Settings().VALIDATE_DURING_CREATION is False

    def test_validation_switch_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The switch is read from CV_VALIDATE_DURING_CREATION."""
        monkeypatch.setenv("CV_VALIDATE_DURING_CREATION", "true")
        assert Settings().VALIDATE_DURING_CREATION is True

    def test_unprefixed_variables_are_ignored(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("CV_VALIDATE_DURING_CREATION", raising=False)
        monkeypatch.setenv("VALIDATE_DURING_CREATION", "true")
        assert Settings().VALIDATE_DURING_CREATION is False

    def test_file_sink_defaults(self) -> None:
        settings = Settings(LOG_FILE=None)
        assert settings.LOG_FILE is None
        assert settings.LOG_ROTATION == "10 MB"
        assert settings.LOG_RETENTION == "7 days"

    def test_get_settings_returns_shared_instance(self) -> None:
        assert get_settings() is get_settings()


class TestGetLogLevel:
    """Tests for Settings.get_log_level."""

    def test_debug_in_development(self) -> None:
        settings = Settings(ENVIRONMENT="development", LOG_LEVEL=None)
        assert settings.get_log_level() == "DEBUG"

    def test_info_outside_development(self) -> None:
        settings = Settings(ENVIRONMENT="production", LOG_LEVEL=None)
        assert settings.get_log_level() == "INFO"

    def test_explicit_level_wins(self) -> None:
        settings = Settings(ENVIRONMENT="development", LOG_LEVEL="warning")
        assert settings.get_log_level() == "WARNING"

    def test_blank_level_falls_back(self) -> None:
        """An empty LOG_LEVEL behaves as unset."""
        settings = Settings(ENVIRONMENT="production", LOG_LEVEL=" ")
        assert settings.LOG_LEVEL is None
        assert settings.get_log_level() == "INFO"
