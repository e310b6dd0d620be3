"""
Shared movie-plots library code.

This package holds the movie lookup and translation pipeline used by the
FastAPI app in `api/`.

App entrypoints (FastAPI routers, the dev server launcher) should live outside
this package and import from `movie_plots` rather than the other way around.
"""
