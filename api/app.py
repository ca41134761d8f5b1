# Path: api/app.py
# Purpose: Expose a FastAPI application for browsing and searching the gallery.
# Layer: api.
# Details: Provides health checks and gallery endpoints delegating to GalleryQueryService.

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from core.search.pipeline import GalleryQueryService
from core.store.base import StoreUnavailable

NO_STORE_HEADERS = {"Cache-Control": "no-store"}


def create_app(service: Optional[GalleryQueryService] = None, title: str = "Artify Gallery API") -> FastAPI:
    """Create a FastAPI app instance configured with the provided gallery service."""

    app = FastAPI(title=title, version="0.1.0")

    def require_service() -> GalleryQueryService:
        if service is None:
            raise HTTPException(status_code=500, detail="Gallery service is not configured.")
        return service

    @app.exception_handler(StoreUnavailable)
    async def store_unavailable(request: Request, exc: StoreUnavailable) -> JSONResponse:
        return JSONResponse(status_code=503, content={"detail": str(exc)}, headers=NO_STORE_HEADERS)

    @app.get("/health")
    def health() -> Dict[str, str]:
        """Return a simple health status payload."""

        return {"status": "ok"}

    @app.get("/api/dbcheck")
    def dbcheck() -> JSONResponse:
        """Report whether the backing store answers."""

        status = require_service().check_store()
        return JSONResponse(content=status, headers=NO_STORE_HEADERS)

    @app.get("/api/images")
    def list_images(
        page: Optional[str] = None,
        page_size: Optional[str] = Query(default=None, alias="pageSize"),
        query: str = "",
    ) -> Dict[str, Any]:
        """List gallery images, ranked by relevance when ``query`` is given."""

        # Raw strings so a malformed page falls back to 1 instead of a 422.
        result = require_service().list_images(page=page, page_size=page_size, search_query=query)
        return result.to_dict()

    @app.get("/api/images/{image_id}")
    def get_image(image_id: str) -> Dict[str, Any]:
        """Return one image with its author inlined."""

        record = require_service().get_image(image_id)
        if record is None:
            raise HTTPException(status_code=404, detail="Image not found")
        return record.to_dict()

    @app.get("/api/users/{author_id}/images")
    def list_user_images(
        author_id: str,
        page: Optional[str] = None,
        page_size: Optional[str] = Query(default=None, alias="pageSize"),
    ) -> Dict[str, Any]:
        """List one author's images, newest first."""

        result = require_service().list_user_images(author_id, page=page, page_size=page_size)
        payload = result.to_dict()
        payload.pop("savedImages")
        return payload

    return app
