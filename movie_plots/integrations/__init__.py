"""
External system integrations (OMDB, translation service).

Each provider client lives under its own subpackage so it stays decoupled from
the FastAPI app in `api/`.
"""
