# Path: core/search/pagination.py
# Purpose: Rank scored candidates and slice a fixed-size gallery page.
# Layer: core/search.
# Details: Ordering is score desc then updatedAt desc; numpy's lexsort keeps full ties in fetch order.

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from core.models.domain import ScoredRecord


def total_pages_for(count: int, page_size: int) -> int:
    """Number of pages needed for ``count`` items, never less than one."""

    return max(1, math.ceil(count / page_size))


def _timestamp(item: ScoredRecord) -> float:
    updated_at = item.record.updated_at
    # Records without a timestamp sort after every dated record.
    return updated_at.timestamp() if updated_at is not None else -math.inf


def rank(scored: Sequence[ScoredRecord]) -> List[ScoredRecord]:
    """Return ``scored`` ordered by relevance, newest first among equal scores."""

    if not scored:
        return []
    scores = np.fromiter((item.score for item in scored), dtype=np.int64, count=len(scored))
    timestamps = np.fromiter((_timestamp(item) for item in scored), dtype=np.float64, count=len(scored))
    # lexsort treats the last key as primary.
    order = np.lexsort((-timestamps, -scores))
    return [scored[index] for index in order]


def paginate(scored: Sequence[ScoredRecord], page: int, page_size: int) -> Tuple[List[ScoredRecord], int]:
    """Sort scored records and return the requested page plus the total page count.

    A page past the end yields an empty slice rather than an error.
    """

    ranked = rank(scored)
    start = (page - 1) * page_size
    return ranked[start : start + page_size], total_pages_for(len(ranked), page_size)
