"""Tests configuration — variables d'environnement NEWSLETTER_*."""
import pytest

from newsletter_builder.config import get_settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "NEWSLETTER_LOG_LEVEL",
        "NEWSLETTER_CORS_ORIGINS",
        "NEWSLETTER_CONTAINER_BACKGROUND",
        "NEWSLETTER_TEXT_COLOR",
        "NEWSLETTER_LINK_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ("*",)
    theme = settings.default_theme()
    assert theme.container_background == "#ffffff"
    assert theme.container_text_color == "#333333"
    assert theme.global_link_color == "#6366f1"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("NEWSLETTER_LOG_LEVEL", "debug")
    monkeypatch.setenv("NEWSLETTER_CORS_ORIGINS", "https://a.test, https://b.test,")
    monkeypatch.setenv("NEWSLETTER_CONTAINER_BACKGROUND", "#000000")
    monkeypatch.setenv("NEWSLETTER_TEXT_COLOR", "#eeeeee")
    monkeypatch.setenv("NEWSLETTER_LINK_COLOR", "#ff6600")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("https://a.test", "https://b.test")
    theme = settings.default_theme()
    assert theme.container_background == "#000000"
    assert theme.container_text_color == "#eeeeee"
    assert theme.global_link_color == "#ff6600"


def test_blank_origins_allow_all(monkeypatch):
    monkeypatch.setenv("NEWSLETTER_CORS_ORIGINS", " , ")
    assert load_settings().cors_origins == ("*",)


def test_settings_are_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
