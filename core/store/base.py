# Path: core/store/base.py
# Purpose: Define the ImageStore interface the gallery search reads from.
# Layer: core/store.
# Details: Provides abstract read methods plus the single error kind surfaced to callers.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from core.models.domain import ImageRecord

if TYPE_CHECKING:
    from core.search.filters import GalleryFilter


class StoreUnavailable(RuntimeError):
    """Raised when the backing document store cannot be reached or a read fails."""


class ImageStore(ABC):
    """Abstract base class for gallery document stores.

    Every returned record has its ``author`` populated when the author exists.
    """

    name: str

    @abstractmethod
    def find_matching(self, gallery_filter: GalleryFilter, limit: Optional[int] = None) -> List[ImageRecord]:
        """Return records satisfying ``gallery_filter``, at most ``limit`` of them."""

    @abstractmethod
    def find_page(self, skip: int, limit: int) -> List[ImageRecord]:
        """Return one page of all records ordered by ``updated_at`` descending."""

    @abstractmethod
    def count(self) -> int:
        """Return the total number of stored records."""

    @abstractmethod
    def get_by_id(self, image_id: str) -> Optional[ImageRecord]:
        """Return the record with the given identifier if present."""

    @abstractmethod
    def find_by_author(self, author_id: str, skip: int, limit: int) -> List[ImageRecord]:
        """Return one page of an author's records ordered by ``updated_at`` descending."""

    @abstractmethod
    def count_by_author(self, author_id: str) -> int:
        """Return how many records belong to the author."""

    @abstractmethod
    def ping(self) -> bool:
        """Return True when the store answers; raise StoreUnavailable otherwise."""

    @abstractmethod
    def self_test(self) -> Dict[str, Any]:
        """Ping, then write, read back, and delete a scratch document.

        Returns ``ping``, ``database``, ``insertedId`` and ``fetchedExists``.
        """
