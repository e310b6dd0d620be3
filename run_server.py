#!/usr/bin/env python3
"""
Development server launcher for the Movie Plots API.

Reads PORT (default 3000) from the same settings the app uses, so a missing
API_KEY / BASE_URL stops the launcher before uvicorn starts.
"""
from __future__ import annotations

import logging
import sys

import uvicorn

from movie_plots.settings import SettingsError, load_settings


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        settings = load_settings()
    except SettingsError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    print(f"Server will be available at: http://localhost:{settings.port}")
    uvicorn.run("api.main:app", host="0.0.0.0", port=settings.port, log_level="info")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
