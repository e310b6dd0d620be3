"""
Movie lookup and translation pipeline.

validate -> sanitize -> OMDB lookup -> translate plot -> shape result.
Either both provider calls succeed and a full `MoviePlot` comes back, or the
first failure propagates unchanged and nothing partial is returned.
"""
from __future__ import annotations

import logging

import requests

from movie_plots.errors import MovieNotFoundError, MoviePlotsError, MovieQueryValidationError
from movie_plots.integrations.omdb.client import fetch_movie
from movie_plots.integrations.translation.client import translate_text
from movie_plots.models.movies import MoviePlot, MovieQuery
from movie_plots.settings import Settings

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100

_UNSAFE_CHARS = str.maketrans("", "", "<>")

logger = logging.getLogger(__name__)


def validate_movie_name(raw: str | None) -> str:
    """Trim `raw` and enforce the 2..100 character bounds. Returns the trimmed name."""
    name = (raw or "").strip()
    if len(name) < MIN_NAME_LENGTH:
        raise MovieQueryValidationError(f"name required, minimum {MIN_NAME_LENGTH} characters")
    if len(name) > MAX_NAME_LENGTH:
        raise MovieQueryValidationError(f"name too long, maximum {MAX_NAME_LENGTH} characters")
    return name


def sanitize_movie_name(name: str) -> str:
    # Only keeps markup delimiters out of URLs/logs; not a general injection filter.
    return name.translate(_UNSAFE_CHARS)


def parse_movie_query(raw: str | None) -> MovieQuery:
    sanitized = sanitize_movie_name(validate_movie_name(raw)).strip()
    if not sanitized:
        raise MovieQueryValidationError(f"name required, minimum {MIN_NAME_LENGTH} characters")
    return MovieQuery(name=sanitized)


def lookup_and_translate(
    raw_name: str | None,
    *,
    settings: Settings,
    session: requests.Session | None = None,
) -> MoviePlot:
    query = parse_movie_query(raw_name)
    logger.info(f"Movie search: {query.name!r}")

    session = session or requests.Session()
    try:
        info = fetch_movie(
            query.name,
            api_key=settings.omdb_api_key,
            base_url=settings.omdb_base_url,
            session=session,
            timeout_seconds=settings.lookup_timeout_seconds,
        )
        logger.info(f"Movie found: {info.title!r}")

        translation = translate_text(
            info.plot,
            base_url=settings.translate_base_url,
            source=settings.source_language,
            target=settings.target_language,
            session=session,
            timeout_seconds=settings.translate_timeout_seconds,
        )
    except MovieNotFoundError as exc:
        logger.warning(f"Movie not found for {query.name!r}: {exc.message}")
        raise
    except MoviePlotsError as exc:
        detail = getattr(exc, "detail", None) or exc.message
        logger.error(f"Movie search failed for {query.name!r}: {type(exc).__name__}: {detail}")
        raise

    return MoviePlot(title=info.title, plot=translation.translated_text)
