"""
Movie Plots API - FastAPI application.

Provides endpoints for:
- Searching a movie by title and returning its plot translated (OMDB + translation service)
- Health checks for monitoring and deploys
"""
from __future__ import annotations

import logging
import os
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import movies
from movie_plots.errors import InternalPipelineError, MoviePlotsError
from movie_plots.settings import SettingsError, load_settings, parse_cors_origins

SERVICE_NAME = "movie-plots-api"

logger = logging.getLogger(__name__)

_started_at = time.monotonic()


def get_cors_origins() -> list[str]:
    """
    Get CORS allowed origins from environment.
    Set CORS_ALLOW_ORIGINS as comma-separated list of origins.
    Example: CORS_ALLOW_ORIGINS=http://localhost:5173,https://plots.example.com
    """
    return parse_cors_origins(os.getenv("CORS_ALLOW_ORIGINS"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Refuse to start without provider configuration."""
    logger.info("Starting up Movie Plots API...")
    try:
        settings = load_settings()
    except SettingsError as exc:
        logger.error(f"Invalid configuration: {exc}")
        raise
    logger.info(f"Translating plots {settings.source_language} -> {settings.target_language}")
    yield
    logger.info("Shutting down Movie Plots API...")


app = FastAPI(
    title="Movie Plots API",
    description="Look up a movie on OMDB and return its plot translated",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
# If no origins configured, allows all origins but disables credentials
cors_origins = get_cors_origins()
allow_credentials = len(cors_origins) > 0

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins if cors_origins else ["*"],
    allow_credentials=allow_credentials,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(MoviePlotsError)
async def movie_plots_error_handler(_request: Request, exc: MoviePlotsError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(SettingsError)
async def settings_error_handler(_request: Request, exc: SettingsError) -> JSONResponse:
    logger.error(f"Configuration error while serving request: {exc}")
    # Don't leak configuration details to the client
    return JSONResponse(status_code=500, content={"message": InternalPipelineError.default_message})


@app.exception_handler(Exception)
async def unexpected_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error while serving request: {type(exc).__name__}")
    return JSONResponse(status_code=500, content={"message": InternalPipelineError.default_message})


app.include_router(movies.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {"status": "ok", "service": SERVICE_NAME}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {
        "status": "OK",
        "service": SERVICE_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": time.monotonic() - _started_at,
    }
