# Path: api/server.py
# Purpose: Wire settings, logging, the Mongo store, and the FastAPI app into a runnable server.
# Layer: api.
# Details: Entry point for `artify-gallery-api`; served with uvicorn.

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from config import AppSettings, configure_logging
from core.search.pipeline import GalleryQueryService
from core.store.mongo_store import MongoImageStore

from .app import create_app


def build_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Create the production app backed by MongoDB."""

    settings = settings or AppSettings.from_env()
    store = MongoImageStore.from_settings(settings)
    return create_app(GalleryQueryService(store, settings.search), title=settings.api.title)


def main() -> None:
    """Run the API server."""

    import uvicorn

    settings = AppSettings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(build_app(settings), host=settings.api.host, port=settings.api.port)


if __name__ == "__main__":
    main()
