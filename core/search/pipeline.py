# Path: core/search/pipeline.py
# Purpose: Orchestrate gallery listing by combining sanitization, expansion, filtering, scoring, and paging.
# Layer: core/search.
# Details: Empty queries use store-native paging; text queries rank every matching candidate in memory.

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from config.settings import SearchSettings
from core.models.domain import GalleryPage, ImageRecord, ScoredRecord
from core.store.base import ImageStore

from .aliases import expand_query
from .filters import build_filter
from .pagination import paginate, total_pages_for
from .sanitizer import sanitize_query
from .scoring import score_record

logger = logging.getLogger(__name__)


def coerce_page(value: Any) -> int:
    """Turn a caller-supplied page number into a positive integer, defaulting to 1."""

    try:
        page = int(value)
    except (TypeError, ValueError, OverflowError):
        return 1
    return page if page >= 1 else 1


def coerce_page_size(value: Any, default: int) -> int:
    """Turn a caller-supplied page size into a positive integer, falling back to ``default``."""

    try:
        page_size = int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return page_size if page_size >= 1 else default


class GalleryQueryService:
    """High-level service bridging API and script layers with an image store."""

    def __init__(self, store: ImageStore, settings: Optional[SearchSettings] = None) -> None:
        self.store = store
        self.settings = settings or SearchSettings()

    def list_images(self, page: Any = 1, page_size: Any = None, search_query: Optional[str] = "") -> GalleryPage:
        """
        Return one gallery page, ranked by relevance when a search query is present.

        External calls:
        - core/store/base.py::ImageStore.find_page - recency page for the no-query path.
        - core/store/base.py::ImageStore.find_matching - all candidates for the query path.
        - core/store/base.py::ImageStore.count - total images in the gallery.
        """

        page = coerce_page(page)
        page_size = coerce_page_size(page_size, self.settings.page_size)
        query = sanitize_query(search_query, self.settings.max_query_length)

        if not query:
            return self._recent_page(page, page_size)

        query_lower = query.lower()
        terms = expand_query(query_lower)
        gallery_filter = build_filter(query, terms.transformation_variations, terms.spelling_variations)

        limit = self.settings.max_candidates
        candidates = self.store.find_matching(gallery_filter, limit=limit)
        if len(candidates) >= limit:
            logger.warning(f"Search for {query!r} reached the candidate cap of {limit}; ranking a partial set")

        scored = [
            ScoredRecord(record=record, score=score_record(record, query_lower, terms.transformation_variations))
            for record in candidates
        ]
        page_items, total_pages = paginate(scored, page, page_size)
        logger.debug(f"Search {query!r}: {len(candidates)} matches, page {page}/{total_pages}")

        return GalleryPage(
            data=[item.record for item in page_items],
            total_pages=total_pages,
            total_record_count=self.store.count(),
        )

    def _recent_page(self, page: int, page_size: int) -> GalleryPage:
        records = self.store.find_page(skip=(page - 1) * page_size, limit=page_size)
        total = self.store.count()
        return GalleryPage(data=records, total_pages=total_pages_for(total, page_size), total_record_count=total)

    def list_user_images(self, author_id: str, page: Any = 1, page_size: Any = None) -> GalleryPage:
        """Return one page of an author's images, newest first."""

        page = coerce_page(page)
        page_size = coerce_page_size(page_size, self.settings.page_size)
        records: List[ImageRecord] = self.store.find_by_author(
            author_id, skip=(page - 1) * page_size, limit=page_size
        )
        total = self.store.count_by_author(author_id)
        return GalleryPage(data=records, total_pages=total_pages_for(total, page_size), total_record_count=total)

    def get_image(self, image_id: str) -> Optional[ImageRecord]:
        """Return a single image with its author populated, or None when unknown."""

        return self.store.get_by_id(image_id)

    def check_store(self) -> Dict[str, Any]:
        """Deep health check: ping plus a write/read/delete roundtrip.

        StoreUnavailable propagates to the caller.
        """

        report = self.store.self_test()
        return {
            "ok": bool(report["ping"] and report["fetchedExists"]),
            "store": self.store.name,
            "dbName": report["database"],
            "ping": report["ping"],
            "roundtrip": {"insertedId": report["insertedId"], "fetchedExists": report["fetchedExists"]},
        }
