# Path: core/store/memory_store.py
# Purpose: Provide an in-memory ImageStore.
# Layer: core/store.
# Details: Evaluates gallery filters in Python; used for tests, demos, and local development.

from __future__ import annotations

import math
import uuid
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from core.models.domain import ImageRecord

from .base import ImageStore

if TYPE_CHECKING:
    from core.search.filters import GalleryFilter


def _recency_key(record: ImageRecord) -> float:
    return record.updated_at.timestamp() if record.updated_at is not None else -math.inf


class InMemoryImageStore(ImageStore):
    """List-backed store whose records keep their insertion order for equal timestamps."""

    def __init__(self, records: Optional[Iterable[ImageRecord]] = None, name: str = "memory") -> None:
        self.name = name
        self._records: List[ImageRecord] = list(records or [])
        self._scratch: List[Dict[str, Any]] = []

    def add(self, record: ImageRecord) -> None:
        """Append a record to the store."""

        self._records.append(record)

    def find_matching(self, gallery_filter: "GalleryFilter", limit: Optional[int] = None) -> List[ImageRecord]:
        matched: List[ImageRecord] = []
        for record in self._records:
            if gallery_filter.matches(record):
                matched.append(record)
                if limit is not None and len(matched) >= limit:
                    break
        return matched

    def find_page(self, skip: int, limit: int) -> List[ImageRecord]:
        return self._newest_first(self._records)[skip : skip + limit]

    def count(self) -> int:
        return len(self._records)

    def get_by_id(self, image_id: str) -> Optional[ImageRecord]:
        return next((record for record in self._records if record.id == image_id), None)

    def find_by_author(self, author_id: str, skip: int, limit: int) -> List[ImageRecord]:
        return self._newest_first(self._authored_by(author_id))[skip : skip + limit]

    def count_by_author(self, author_id: str) -> int:
        return len(self._authored_by(author_id))

    def ping(self) -> bool:
        return True

    def self_test(self) -> Dict[str, Any]:
        ping = self.ping()
        scratch: Dict[str, Any] = {"_id": uuid.uuid4().hex, "kind": "selftest"}
        self._scratch.append(scratch)
        try:
            fetched = next((item for item in self._scratch if item["_id"] == scratch["_id"]), None)
        finally:
            self._scratch.remove(scratch)
        return {"ping": ping, "database": self.name, "insertedId": scratch["_id"], "fetchedExists": fetched is not None}

    def _authored_by(self, author_id: str) -> List[ImageRecord]:
        return [record for record in self._records if record.author is not None and record.author.id == author_id]

    @staticmethod
    def _newest_first(records: Iterable[ImageRecord]) -> List[ImageRecord]:
        return sorted(records, key=_recency_key, reverse=True)
