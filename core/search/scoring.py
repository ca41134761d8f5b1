# Path: core/search/scoring.py
# Purpose: Assign additive relevance scores to gallery candidates.
# Layer: core/search.
# Details: Points accumulate across fields; within a field the best tier wins, alias bonuses stack.

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from core.models.domain import ImageRecord


@dataclass(frozen=True)
class ScoreWeights:
    """Points awarded per field and match tier."""

    title_exact: int = 100
    title_contains: int = 50
    title_word_start: int = 25
    type_exact: int = 80
    type_contains: int = 40
    type_alias: int = 35
    prompt_contains: int = 30
    author_contains: int = 35
    color_contains: int = 20
    aspect_ratio_contains: int = 15


DEFAULT_WEIGHTS = ScoreWeights()


def _lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value else None


def _contains_points(value: Optional[str], query: str, points: int) -> int:
    lowered = _lower(value)
    return points if lowered is not None and query in lowered else 0


def score_record(
    record: ImageRecord,
    query_lower: str,
    transformation_variations: Iterable[str] = (),
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> int:
    """Return the non-negative relevance score of ``record`` for ``query_lower``."""

    score = 0

    title = _lower(record.title)
    if title is not None:
        if title == query_lower:
            score += weights.title_exact
        elif query_lower in title:
            score += weights.title_contains
        elif any(word.startswith(query_lower) for word in title.split()):
            score += weights.title_word_start

    transformation_type = _lower(record.transformation_type)
    if transformation_type is not None:
        if transformation_type == query_lower:
            score += weights.type_exact
        elif query_lower in transformation_type:
            score += weights.type_contains
        if any(variation.lower() in transformation_type for variation in transformation_variations):
            score += weights.type_alias

    score += _contains_points(record.prompt, query_lower, weights.prompt_contains)

    if record.author is not None:
        first_name = _lower(record.author.first_name) or ""
        last_name = _lower(record.author.last_name) or ""
        if query_lower in first_name or query_lower in last_name:
            score += weights.author_contains

    score += _contains_points(record.color, query_lower, weights.color_contains)
    score += _contains_points(record.aspect_ratio, query_lower, weights.aspect_ratio_contains)
    return score
