"""
Process configuration for the movie-plots service.

Values come from the environment (optionally seeded from a `.env` file) and are
read once; callers pass the resulting `Settings` into the clients explicitly.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping

from movie_plots.utils.env import load_env

DEFAULT_TRANSLATE_URL = "http://localhost:5000"
DEFAULT_LOOKUP_TIMEOUT_SECONDS = 5.0
DEFAULT_PORT = 3000

REQUIRED_ENV_VARS = ("API_KEY", "BASE_URL")


class SettingsError(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    omdb_api_key: str
    omdb_base_url: str
    translate_base_url: str = DEFAULT_TRANSLATE_URL
    source_language: str = "en"
    target_language: str = "pt"
    lookup_timeout_seconds: float = DEFAULT_LOOKUP_TIMEOUT_SECONDS
    translate_timeout_seconds: float | None = None  # None: wait as long as the provider takes
    port: int = DEFAULT_PORT


def _get(env: Mapping[str, str], name: str) -> str:
    return (env.get(name) or "").strip()


def _parse_float(env: Mapping[str, str], name: str, default: float | None) -> float | None:
    raw = _get(env, name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise SettingsError(f"{name} must be a number, got {raw!r}.") from exc
    if value <= 0:
        raise SettingsError(f"{name} must be positive, got {raw!r}.")
    return value


def _parse_port(env: Mapping[str, str]) -> int:
    raw = _get(env, "PORT")
    if not raw:
        return DEFAULT_PORT
    if not raw.isdigit() or not 0 < int(raw) < 65536:
        raise SettingsError(f"PORT must be a TCP port number, got {raw!r}.")
    return int(raw)


def parse_cors_origins(value: str | None) -> list[str]:
    """
    Split a comma-separated origin list.
    Example: CORS_ALLOW_ORIGINS=http://localhost:5173,https://plots.example.com
    """
    if not value:
        return []
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def settings_from_env(env: Mapping[str, str]) -> Settings:
    missing = [name for name in REQUIRED_ENV_VARS if not _get(env, name)]
    if missing:
        raise SettingsError(
            f"Missing environment variables: {', '.join(missing)}. Configure them in the .env file."
        )

    lookup_timeout = _parse_float(env, "OMDB_TIMEOUT_SECONDS", None) or DEFAULT_LOOKUP_TIMEOUT_SECONDS

    return Settings(
        omdb_api_key=_get(env, "API_KEY"),
        omdb_base_url=_get(env, "BASE_URL"),
        translate_base_url=(_get(env, "TRANSLATE_URL") or DEFAULT_TRANSLATE_URL).rstrip("/"),
        source_language=_get(env, "TRANSLATE_SOURCE") or "en",
        target_language=_get(env, "TRANSLATE_TARGET") or "pt",
        lookup_timeout_seconds=lookup_timeout,
        translate_timeout_seconds=_parse_float(env, "TRANSLATE_TIMEOUT_SECONDS", None),
        port=_parse_port(env),
    )


@lru_cache
def load_settings() -> Settings:
    """Load `.env` (if any) and build settings from `os.environ`. Cached for the process."""
    load_env()
    return settings_from_env(os.environ)
