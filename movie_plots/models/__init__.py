"""
Domain models shared by the pipeline and the API.
"""

from movie_plots.models.movies import MovieInfo, MoviePlot, MovieQuery, Translation

__all__ = [
    "MovieInfo",
    "MoviePlot",
    "MovieQuery",
    "Translation",
]
