"""
Movie search endpoint: title lookup plus translated plot.
"""
from __future__ import annotations

from fastapi import APIRouter, Query
from pydantic import BaseModel

from api.deps import AppSettings, HttpSession
from movie_plots.services.movie_plots import lookup_and_translate


router = APIRouter(prefix="/movie", tags=["movies"])


# --- Pydantic models ---

class MoviePlotResponse(BaseModel):
    title: str
    plot: str


class ErrorResponse(BaseModel):
    message: str


# --- Endpoints ---

@router.get(
    "/search",
    response_model=MoviePlotResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def search_movie(
    settings: AppSettings,
    session: HttpSession,
    movie: str | None = Query(default=None, description="Movie title, e.g. Inception"),
) -> dict:
    """
    Look a movie up by title and return it with its plot translated.

    Example: GET /movie/search?movie=Inception
    A missing `movie` parameter is answered like any other invalid name (400).
    """
    result = lookup_and_translate(movie, settings=settings, session=session)
    return result.to_dict()
