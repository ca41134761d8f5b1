# Path: config/settings.py
# Purpose: Provide typed application configuration models.
# Layer: config.
# Details: Centralizes settings for the document store, gallery search limits, and the HTTP API.

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class SearchSettings(BaseModel):
    """Settings bounding gallery search and pagination."""

    page_size: int = Field(default=9, ge=1, description="Default number of images per gallery page.")
    max_query_length: int = Field(default=120, ge=1, description="Maximum length of a sanitized search query.")
    max_candidates: int = Field(
        default=5000,
        ge=1,
        description="Upper bound on records fetched for in-memory ranking of a single query.",
    )
    query_timeout_ms: int = Field(default=5000, ge=1, description="Server-side time limit for each store read.")


class ApiSettings(BaseModel):
    """Settings for the HTTP API process."""

    title: str = Field(default="Artify Gallery API", description="Title advertised in the OpenAPI schema.")
    host: str = Field(default="127.0.0.1", description="Interface the API server binds to.")
    port: int = Field(default=8000, description="Port the API server listens on.")


class AppSettings(BaseModel):
    """Top-level application settings shared across services and interfaces."""

    mongodb_url: Optional[str] = Field(default=None, description="MongoDB connection string.")
    database_name: str = Field(default="Artify", description="Database holding the gallery collections.")
    images_collection: str = Field(default="images", description="Collection storing image documents.")
    users_collection: str = Field(default="users", description="Collection storing image authors.")
    search: SearchSettings = Field(default_factory=SearchSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")

    @classmethod
    def from_env(cls, env_file: Path | str | None = ".env.local") -> "AppSettings":
        """Instantiate settings from environment variables, loading ``env_file`` first when present."""

        if env_file is not None and Path(env_file).exists():
            load_dotenv(env_file, override=False)

        search_overrides = {
            key: value
            for key, value in (
                ("page_size", os.getenv("GALLERY_PAGE_SIZE")),
                ("max_candidates", os.getenv("GALLERY_MAX_CANDIDATES")),
                ("query_timeout_ms", os.getenv("GALLERY_QUERY_TIMEOUT_MS")),
            )
            if value
        }
        overrides = {
            key: value
            for key, value in (
                ("mongodb_url", os.getenv("MONGODB_URL")),
                ("database_name", os.getenv("MONGODB_DB_NAME")),
                ("log_level", os.getenv("LOG_LEVEL")),
            )
            if value
        }
        return cls.model_validate({**overrides, "search": search_overrides})

    def require_mongodb_url(self) -> str:
        """Return the configured MongoDB URL or fail loudly when it is missing."""

        if not self.mongodb_url:
            raise ValueError("MONGODB_URL is not set; configure it in the environment or .env.local")
        return self.mongodb_url


__all__ = ["AppSettings", "ApiSettings", "SearchSettings"]
