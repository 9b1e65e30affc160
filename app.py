"""Application factory and entry point for the HTTP calculator panel.

Run with:
    uvicorn app:app --reload
"""
from __future__ import annotations

from fastapi import FastAPI

from api import router, set_store
from settings import Settings, configure_logging
from store import SessionStore


def create_app(
    store: SessionStore | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    Accepts an optional store and settings for testing; otherwise creates a
    fresh store and reads settings from the environment.
    """
    if store is None:
        store = SessionStore()
    if settings is None:
        settings = Settings.from_env()

    configure_logging(settings)
    set_store(store)

    app = FastAPI(
        title=settings.title,
        description=(
            "Button calculator panel. Each session holds one calculator; "
            "clients fetch the rendered button grid and display, then press "
            "buttons one at a time."
        ),
        version="0.1.0",
    )
    app.include_router(router)
    return app


# Default app instance for `uvicorn app:app`
app = create_app()
