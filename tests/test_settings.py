from __future__ import annotations

import pytest

from movie_plots import settings as settings_mod
from movie_plots.settings import Settings, SettingsError, parse_cors_origins, settings_from_env


def test_settings_from_env_applies_defaults() -> None:
    settings = settings_from_env({"API_KEY": "k", "BASE_URL": "http://www.omdbapi.com/"})

    assert settings == Settings(omdb_api_key="k", omdb_base_url="http://www.omdbapi.com/")
    assert settings.translate_base_url == "http://localhost:5000"
    assert (settings.source_language, settings.target_language) == ("en", "pt")
    assert settings.lookup_timeout_seconds == 5.0
    assert settings.translate_timeout_seconds is None
    assert settings.port == 3000


def test_settings_from_env_reads_overrides() -> None:
    settings = settings_from_env(
        {
            "API_KEY": " k ",
            "BASE_URL": "http://omdb.test/",
            "TRANSLATE_URL": "http://translate.test:5000/",
            "TRANSLATE_TARGET": "es",
            "OMDB_TIMEOUT_SECONDS": "2.5",
            "TRANSLATE_TIMEOUT_SECONDS": "10",
            "PORT": "8080",
        }
    )

    assert settings.omdb_api_key == "k"
    assert settings.translate_base_url == "http://translate.test:5000"
    assert settings.target_language == "es"
    assert settings.lookup_timeout_seconds == 2.5
    assert settings.translate_timeout_seconds == 10.0
    assert settings.port == 8080


def test_settings_from_env_names_every_missing_variable() -> None:
    with pytest.raises(SettingsError) as excinfo:
        settings_from_env({"BASE_URL": "  "})

    assert "API_KEY" in str(excinfo.value)
    assert "BASE_URL" in str(excinfo.value)


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("OMDB_TIMEOUT_SECONDS", "soon"),
        ("OMDB_TIMEOUT_SECONDS", "0"),
        ("TRANSLATE_TIMEOUT_SECONDS", "-1"),
        ("PORT", "http"),
        ("PORT", "70000"),
    ],
)
def test_settings_from_env_rejects_malformed_numbers(name: str, value: str) -> None:
    with pytest.raises(SettingsError) as excinfo:
        settings_from_env({"API_KEY": "k", "BASE_URL": "http://omdb.test/", name: value})
    assert name in str(excinfo.value)


def test_parse_cors_origins() -> None:
    assert parse_cors_origins(None) == []
    assert parse_cors_origins("") == []
    assert parse_cors_origins(" http://a.test , ,http://b.test") == ["http://a.test", "http://b.test"]


def test_load_settings_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings_mod, "load_env", lambda: None)
    monkeypatch.setenv("API_KEY", "from-env")
    monkeypatch.setenv("BASE_URL", "http://omdb.env/")
    settings_mod.load_settings.cache_clear()
    try:
        assert settings_mod.load_settings().omdb_api_key == "from-env"
        assert settings_mod.load_settings() is settings_mod.load_settings()
    finally:
        settings_mod.load_settings.cache_clear()
