from __future__ import annotations

import requests

from movie_plots.errors import InternalPipelineError, UpstreamUnavailableError
from movie_plots.models.movies import Translation

TRANSLATE_API_BASE_URL = "http://localhost:5000"
TRANSLATION_PROVIDER = "translation"


def build_translate_body(text: str, *, source: str, target: str) -> dict[str, str]:
    return {"q": text, "source": source, "target": target, "format": "text"}


def translate_text(
    text: str,
    *,
    base_url: str = TRANSLATE_API_BASE_URL,
    source: str = "en",
    target: str = "pt",
    session: requests.Session | None = None,
    timeout_seconds: float | None = None,
) -> Translation:
    """
    Translate `text` with a LibreTranslate-compatible `/translate` endpoint.

    No deadline is applied unless `timeout_seconds` is given.
    """

    session = session or requests.Session()
    url = f"{base_url.rstrip('/')}/translate"
    try:
        resp = session.post(
            url,
            json=build_translate_body(text, source=source, target=target),
            headers={"accept": "application/json"},
            timeout=timeout_seconds,
        )
    except requests.RequestException as exc:
        raise UpstreamUnavailableError(
            "Translation failed.",
            provider=TRANSLATION_PROVIDER,
            detail=str(exc),
        ) from exc

    if not resp.ok:
        raise UpstreamUnavailableError(
            f"Translation failed with HTTP {resp.status_code}.",
            provider=TRANSLATION_PROVIDER,
            upstream_status=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise InternalPipelineError("Translation service returned non-JSON response.") from exc

    if not isinstance(payload, dict):
        raise InternalPipelineError("Translation service returned unexpected JSON shape (not an object).")

    try:
        return Translation.from_payload(payload)
    except ValueError as exc:
        raise InternalPipelineError(str(exc)) from exc
