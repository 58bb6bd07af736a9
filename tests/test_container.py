"""Tests for container wiring and settings."""

from bari_score.config import Settings
from bari_score.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.assessment_service.debug is True


def test_settings_defaults(monkeypatch) -> None:
    for name in ("DEBUG", "API_TITLE", "MAX_RECIPE_ITEMS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.debug is False
    assert settings.api_title == "Bariatric Score API"
    assert settings.max_recipe_items == 100


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("MAX_RECIPE_ITEMS", "7")

    settings = Settings()

    assert settings.debug is True
    assert settings.max_recipe_items == 7
