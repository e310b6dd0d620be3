"""
Dependency injection for settings and the outbound HTTP session.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Annotated

import requests
from fastapi import Depends

from movie_plots.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    """
    Returns process settings (loaded once, then cached).
    Raises SettingsError when API_KEY or BASE_URL is missing.
    """
    return load_settings()


def get_http_session() -> Iterator[requests.Session]:
    """
    Yields a requests session for one request's provider calls and closes it afterwards.
    """
    session = requests.Session()
    try:
        yield session
    finally:
        session.close()


# Type aliases for dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
HttpSession = Annotated[requests.Session, Depends(get_http_session)]
