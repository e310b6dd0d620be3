"""
Application services built on top of the provider integrations.
"""

from movie_plots.services.movie_plots import (
    lookup_and_translate,
    parse_movie_query,
    sanitize_movie_name,
    validate_movie_name,
)

__all__ = [
    "lookup_and_translate",
    "parse_movie_query",
    "sanitize_movie_name",
    "validate_movie_name",
]
