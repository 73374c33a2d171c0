"""Unit tests for settings loading."""

import pytest
from pydantic import ValidationError

from status_service.config.settings import Settings, get_settings


@pytest.mark.unit
class TestSettings:
    """Test settings defaults, overrides and validation"""

    def test_defaults(self, monkeypatch):
        for name in ("EMITTER_STARTUP_DELAY", "EMITTER_INTERVAL", "EMITTER_SEED", "PORT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.emitter_enabled is True
        assert settings.emitter_startup_delay == 5.0
        assert settings.emitter_interval == 10.0
        assert settings.emitter_seed is None
        assert settings.port == 8080

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("EMITTER_INTERVAL", "2.5")
        monkeypatch.setenv("emitter_seed", "11")
        monkeypatch.setenv("EMITTER_ENABLED", "false")
        settings = Settings(_env_file=None)

        assert settings.emitter_interval == 2.5
        assert settings.emitter_seed == 11
        assert settings.emitter_enabled is False

    @pytest.mark.parametrize("field, value", [
        ("emitter_interval", 0),
        ("emitter_interval", -1),
        ("emitter_startup_delay", -0.5),
    ])
    def test_rejects_invalid_delays(self, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
