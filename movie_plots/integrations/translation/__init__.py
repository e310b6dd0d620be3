"""
Translation service integration client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from movie_plots.integrations.translation.client import (
        TRANSLATE_API_BASE_URL,
        build_translate_body,
        translate_text,
    )

__all__ = [
    "TRANSLATE_API_BASE_URL",
    "build_translate_body",
    "translate_text",
]


def __getattr__(name: str):
    if name in __all__:
        from movie_plots.integrations.translation import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
