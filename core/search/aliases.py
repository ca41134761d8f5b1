# Path: core/search/aliases.py
# Purpose: Expand a sanitized query with transformation-type aliases and common misspellings.
# Layer: core/search.
# Details: Tables are immutable module constants; matching is plain substring containment.

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Set, Tuple

from core.models.domain import ExpandedTerms

TRANSFORMATION_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "fill": ("fill", "background"),
        "remove": ("removeBackground", "remove", "background removal", "removebg"),
        "recolor": ("recolor", "color"),
        "removebg": ("removeBackground", "removebg", "background", "remove background"),
        "generative": ("generativeFill", "generative", "fill"),
        "restore": ("restore", "restoration"),
        "object": ("objectRemove", "object", "remove"),
        "blur": ("blur", "blurred"),
        "sharpen": ("sharpen", "sharp"),
        "grayscale": ("grayscale", "grey", "gray"),
        "sepia": ("sepia", "vintage"),
        "oil": ("oilPaint", "oil", "painting"),
        "cartoon": ("cartoonify", "cartoon", "anime"),
    }
)

COMMON_MISSPELLINGS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "remove": ("remvoe", "remve", "rmove", "remov", "delete"),
        "background": ("bakground", "bckground", "backgound", "bg"),
        "color": ("colour", "clr", "colr"),
        "generative": ("genrative", "generatve", "gen"),
        "restore": ("restor", "restr", "fix"),
        "blur": ("blr", "blure"),
        "sharpen": ("sharpen", "sharpn"),
    }
)


def _reverse_lookup(table: Mapping[str, Tuple[str, ...]]) -> Mapping[str, str]:
    reverse: Dict[str, str] = {}
    for canonical, misspellings in table.items():
        for misspelling in misspellings:
            reverse.setdefault(misspelling, canonical)
    return MappingProxyType(reverse)


MISSPELLING_TO_CANONICAL: Mapping[str, str] = _reverse_lookup(COMMON_MISSPELLINGS)


def canonical_spelling(token: str) -> Optional[str]:
    """Return the canonical form for a known misspelling, if any."""

    return MISSPELLING_TO_CANONICAL.get(token.lower())


def transformation_variations(query_lower: str) -> Set[str]:
    """Collect every alias of each transformation key the query mentions."""

    found: Set[str] = set()
    for key, variations in TRANSFORMATION_ALIASES.items():
        if key in query_lower or any(variation.lower() in query_lower for variation in variations):
            found.update(variations)
    return found


def spelling_variations(query_lower: str) -> Set[str]:
    """Map canonical words to their misspellings and misspellings back to canonical words."""

    found: Set[str] = set()
    for canonical, misspellings in COMMON_MISSPELLINGS.items():
        if canonical in query_lower:
            found.update(misspellings)
        elif any(misspelling in query_lower for misspelling in misspellings):
            found.add(canonical)
    return found


def expand_query(query_lower: str) -> ExpandedTerms:
    """Expand a lowercased, sanitized query into alias and spelling variations.

    Substrings inside unrelated words still count ("fixture" pulls in
    "restore"); recall is preferred over precision here.
    """

    query_lower = query_lower.lower()
    return ExpandedTerms(
        transformation_variations=frozenset(transformation_variations(query_lower)),
        spelling_variations=frozenset(spelling_variations(query_lower)),
    )
