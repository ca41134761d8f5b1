# Path: core/search/filters.py
# Purpose: Build the match predicate that selects gallery candidates for ranking.
# Layer: core/search.
# Details: One predicate, two renderings: in-memory evaluation and a MongoDB $or filter.

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from core.models.domain import ImageRecord

# (document key, ImageRecord attribute)
WORD_MATCH_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("title", "title"),
    ("transformationType", "transformation_type"),
    ("prompt", "prompt"),
    ("aspectRatio", "aspect_ratio"),
    ("color", "color"),
)
SUBSTRING_MATCH_FIELDS: Tuple[Tuple[str, str], ...] = WORD_MATCH_FIELDS + (("publicId", "public_id"),)
AUTHOR_NAME_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("author.firstName", "first_name"),
    ("author.lastName", "last_name"),
)
TRANSFORMATION_FIELD: Tuple[str, str] = ("transformationType", "transformation_type")
SPELLING_MATCH_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("title", "title"),
    ("transformationType", "transformation_type"),
    ("prompt", "prompt"),
)


def _contains(value: Optional[str], needle: str) -> bool:
    return value is not None and needle in value.lower()


def _regex_clause(key: str, pattern: str) -> Dict[str, Any]:
    return {key: {"$regex": pattern, "$options": "i"}}


@dataclass(frozen=True)
class GalleryFilter:
    """Disjunction of case-insensitive field tests over an :class:`ImageRecord`."""

    query: str = ""
    transformation_variations: Tuple[str, ...] = ()
    spelling_variations: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.query

    @property
    def word_pattern(self) -> str:
        return rf"\b{re.escape(self.query)}\b"

    @property
    def substring_pattern(self) -> str:
        return re.escape(self.query)

    def matches(self, record: ImageRecord) -> bool:
        """Evaluate the predicate against a record held in memory."""

        if self.is_empty:
            return True

        needle = self.query.lower()
        word_regex = re.compile(self.word_pattern, re.IGNORECASE)
        for _, attribute in WORD_MATCH_FIELDS:
            value = getattr(record, attribute)
            if value is not None and word_regex.search(value):
                return True

        if any(_contains(getattr(record, attribute), needle) for _, attribute in SUBSTRING_MATCH_FIELDS):
            return True

        if record.author is not None and any(
            _contains(getattr(record.author, attribute), needle) for _, attribute in AUTHOR_NAME_FIELDS
        ):
            return True

        transformation_type = getattr(record, TRANSFORMATION_FIELD[1])
        if any(_contains(transformation_type, variation.lower()) for variation in self.transformation_variations):
            return True

        return any(
            _contains(getattr(record, attribute), variation.lower())
            for variation in self.spelling_variations
            for _, attribute in SPELLING_MATCH_FIELDS
        )

    def to_mongo(self) -> Dict[str, Any]:
        """Render the predicate as a MongoDB filter over documents with ``author`` already joined."""

        if self.is_empty:
            return {}

        conditions: List[Dict[str, Any]] = []
        conditions.extend(_regex_clause(key, self.word_pattern) for key, _ in WORD_MATCH_FIELDS)
        conditions.extend(_regex_clause(key, self.substring_pattern) for key, _ in SUBSTRING_MATCH_FIELDS)
        conditions.extend(_regex_clause(key, self.substring_pattern) for key, _ in AUTHOR_NAME_FIELDS)
        conditions.extend(
            _regex_clause(TRANSFORMATION_FIELD[0], re.escape(variation))
            for variation in self.transformation_variations
        )
        for variation in self.spelling_variations:
            conditions.extend(_regex_clause(key, re.escape(variation)) for key, _ in SPELLING_MATCH_FIELDS)
        return {"$or": conditions}


def build_filter(
    query: str,
    transformation_variations: Iterable[str] = (),
    spelling_variations: Iterable[str] = (),
) -> GalleryFilter:
    """Create the candidate predicate for a sanitized query and its expansions.

    Variations are sorted so equal inputs always render the same Mongo filter.
    """

    return GalleryFilter(
        query=query,
        transformation_variations=tuple(sorted(transformation_variations)),
        spelling_variations=tuple(sorted(spelling_variations)),
    )
