"""
Tests for settings loading.
"""
import pytest
from pydantic import ValidationError

from indieboxer.config import Settings, get_settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, monkeypatch):
        for name in ("FPS", "SEED", "LOG_LEVEL", "DEBUG_LANES", "WINDOW_SCALE"):
            monkeypatch.delenv(f"INDIEBOXER_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.fps == 60
        assert settings.seed is None
        assert settings.log_level == "INFO"
        assert settings.debug_lanes is False
        assert settings.window_scale == 1.0

    def test_environment_overrides(self, monkeypatch):
        """INDIEBOXER_* variables override defaults."""
        monkeypatch.setenv("INDIEBOXER_FPS", "30")
        monkeypatch.setenv("INDIEBOXER_SEED", "99")
        monkeypatch.setenv("INDIEBOXER_DEBUG_LANES", "true")
        settings = Settings(_env_file=None)
        assert settings.fps == 30
        assert settings.seed == 99
        assert settings.debug_lanes is True

    def test_rejects_bad_fps(self, monkeypatch):
        monkeypatch.setenv("INDIEBOXER_FPS", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
