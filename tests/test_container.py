"""Tests for container wiring and settings."""

from serving_units.config import Settings
from serving_units.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.conversion_service.debug is True


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    settings = Settings()

    assert settings.debug is True
    assert settings.log_level == "WARNING"
