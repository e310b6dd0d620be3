"""
OMDB (Open Movie Database) integration client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from movie_plots.integrations.omdb.client import (
        OMDB_API_BASE_URL,
        build_search_params,
        fetch_movie,
    )

__all__ = [
    "OMDB_API_BASE_URL",
    "build_search_params",
    "fetch_movie",
]


def __getattr__(name: str):
    if name in __all__:
        from movie_plots.integrations.omdb import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
