# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used across store, search, and API layers.

from .domain import Author, ExpandedTerms, GalleryPage, ImageRecord, ScoredRecord

__all__ = ["Author", "ExpandedTerms", "GalleryPage", "ImageRecord", "ScoredRecord"]
