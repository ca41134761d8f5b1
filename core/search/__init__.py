# Path: core/search/__init__.py
# Purpose: Package initializer for gallery search components and the query service.
# Layer: core/search.
# Details: Exposes sanitization, expansion, filtering, scoring, paging, and the orchestrating service.

from .aliases import COMMON_MISSPELLINGS, TRANSFORMATION_ALIASES, canonical_spelling, expand_query
from .filters import GalleryFilter, build_filter
from .pagination import paginate, rank, total_pages_for
from .sanitizer import sanitize_query
from .scoring import DEFAULT_WEIGHTS, ScoreWeights, score_record
from .pipeline import GalleryQueryService, coerce_page, coerce_page_size

__all__ = [
    "COMMON_MISSPELLINGS",
    "TRANSFORMATION_ALIASES",
    "canonical_spelling",
    "expand_query",
    "GalleryFilter",
    "build_filter",
    "paginate",
    "rank",
    "total_pages_for",
    "sanitize_query",
    "DEFAULT_WEIGHTS",
    "ScoreWeights",
    "score_record",
    "GalleryQueryService",
    "coerce_page",
    "coerce_page_size",
]
