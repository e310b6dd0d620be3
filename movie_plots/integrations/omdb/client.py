from __future__ import annotations

from typing import Any

import requests

from movie_plots.errors import (
    InternalPipelineError,
    MovieLookupTimeoutError,
    MovieNotFoundError,
    UpstreamUnavailableError,
)
from movie_plots.models.movies import MovieInfo

OMDB_API_BASE_URL = "http://www.omdbapi.com/"
OMDB_PROVIDER = "omdb"
DEFAULT_TIMEOUT_SECONDS = 5.0


def build_search_params(name: str, *, api_key: str) -> dict[str, str]:
    # `plot=full` asks OMDB for the long plot instead of the one-line summary.
    return {"apikey": api_key, "t": name, "plot": "full"}


def _request_json(
    session: requests.Session,
    url: str,
    *,
    params: dict[str, str],
    timeout_seconds: float,
) -> dict[str, Any]:
    headers = {"accept": "application/json"}
    try:
        resp = session.get(url, params=params, headers=headers, timeout=timeout_seconds)
    except requests.Timeout as exc:
        raise MovieLookupTimeoutError() from exc
    except requests.RequestException as exc:
        raise UpstreamUnavailableError(
            "Movie lookup failed.",
            provider=OMDB_PROVIDER,
            detail=str(exc),
        ) from exc

    if not resp.ok:
        raise UpstreamUnavailableError(
            f"Movie lookup failed with HTTP {resp.status_code}.",
            provider=OMDB_PROVIDER,
            upstream_status=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise InternalPipelineError("OMDB returned non-JSON response.") from exc

    if not isinstance(payload, dict):
        raise InternalPipelineError("OMDB returned unexpected JSON shape (not an object).")
    return payload


def fetch_movie(
    name: str,
    *,
    api_key: str,
    base_url: str = OMDB_API_BASE_URL,
    session: requests.Session | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> MovieInfo:
    """
    Look a movie up by exact title on OMDB.

    `name` must already be validated and sanitized by the caller. Makes exactly
    one request and never retries.
    """

    session = session or requests.Session()
    payload = _request_json(
        session,
        base_url,
        params=build_search_params(name, api_key=api_key),
        timeout_seconds=timeout_seconds,
    )

    # OMDB signals a miss with HTTP 200 and Response="False".
    if payload.get("Response") == "False":
        error = payload.get("Error")
        raise MovieNotFoundError(error if isinstance(error, str) and error.strip() else None)

    try:
        return MovieInfo.from_omdb(payload)
    except ValueError as exc:
        raise InternalPipelineError(str(exc)) from exc
