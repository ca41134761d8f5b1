# Path: core/models/domain.py
# Purpose: Define domain models shared across the store, search, and API layers.
# Layer: core/models.
# Details: Lightweight dataclasses simplify conversion between Mongo documents and caller DTOs.

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, FrozenSet, List, Optional

# Document keys mapped onto explicit ImageRecord attributes; everything else lands in ``extra``.
_RECORD_FIELDS = {
    "title": "title",
    "transformationType": "transformation_type",
    "prompt": "prompt",
    "color": "color",
    "aspectRatio": "aspect_ratio",
    "publicId": "public_id",
}


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass
class Author:
    """Author reference populated from the users collection."""

    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    clerk_id: Optional[str] = None

    @classmethod
    def from_document(cls, payload: Dict[str, Any]) -> "Author":
        return cls(
            id=_optional_str(payload.get("_id")),
            first_name=_optional_str(payload.get("firstName")),
            last_name=_optional_str(payload.get("lastName")),
            clerk_id=_optional_str(payload.get("clerkId")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "clerkId": self.clerk_id,
        }


@dataclass
class ImageRecord:
    """A transformed image as stored in the gallery; every searchable field may be absent."""

    id: Optional[str] = None
    title: Optional[str] = None
    transformation_type: Optional[str] = None
    prompt: Optional[str] = None
    color: Optional[str] = None
    aspect_ratio: Optional[str] = None
    public_id: Optional[str] = None
    author: Optional[Author] = None
    updated_at: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "ImageRecord":
        """Build a record from a Mongo document whose ``author`` may be populated, a raw id, or missing."""

        values: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in document.items():
            if key == "_id":
                values["id"] = _optional_str(value)
            elif key in _RECORD_FIELDS:
                values[_RECORD_FIELDS[key]] = _optional_str(value)
            elif key == "author":
                if isinstance(value, dict):
                    values["author"] = Author.from_document(value)
                elif value is not None:
                    values["author"] = Author(id=str(value))
            elif key == "updatedAt":
                values["updated_at"] = value if isinstance(value, datetime) else None
            else:
                extra[key] = value
        return cls(extra=extra, **values)

    def to_dict(self) -> Dict[str, Any]:
        """Render the caller-facing DTO with the author inlined."""

        payload: Dict[str, Any] = dict(self.extra)
        payload["_id"] = self.id
        for key, attribute in _RECORD_FIELDS.items():
            value = getattr(self, attribute)
            if value is not None:
                payload[key] = value
        payload["author"] = self.author.to_dict() if self.author else None
        payload["updatedAt"] = self.updated_at.isoformat() if self.updated_at else None
        return payload


@dataclass
class ScoredRecord:
    """Record paired with its transient relevance score inside the ranking pipeline."""

    record: ImageRecord
    score: int = 0


@dataclass(frozen=True)
class ExpandedTerms:
    """Alias and misspelling variations derived from a sanitized query."""

    transformation_variations: FrozenSet[str] = frozenset()
    spelling_variations: FrozenSet[str] = frozenset()


@dataclass
class GalleryPage:
    """One page of gallery results as returned to callers."""

    data: List[ImageRecord]
    total_pages: int
    total_record_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": [record.to_dict() for record in self.data],
            "totalPages": self.total_pages,
            "savedImages": self.total_record_count,
        }
