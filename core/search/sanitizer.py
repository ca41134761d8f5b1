# Path: core/search/sanitizer.py
# Purpose: Normalize raw search-box text into a bounded, pattern-safe query string.
# Layer: core/search.
# Details: Output keeps only word characters, single spaces, hyphens, underscores, and periods.

from __future__ import annotations

import re
from typing import Optional

DEFAULT_MAX_QUERY_LENGTH = 120

_STRIPPED_CHARS = re.compile(r"[\"'`\\/]")
_DISALLOWED_CHARS = re.compile(r"[^\w\s\-_.]")
_WHITESPACE_RUN = re.compile(r"\s+")


def sanitize_query(raw: Optional[str], max_len: int = DEFAULT_MAX_QUERY_LENGTH) -> str:
    """Return a cleaned query, or ``""`` when nothing searchable remains.

    Quotes, backticks, backslashes and slashes are dropped outright; any other
    character outside the allowed set becomes a space before whitespace is
    collapsed and the result is cut to ``max_len``.
    """

    if not raw:
        return ""
    cleaned = _STRIPPED_CHARS.sub("", str(raw))
    cleaned = _DISALLOWED_CHARS.sub(" ", cleaned)
    cleaned = _WHITESPACE_RUN.sub(" ", cleaned).strip()
    # A cut may land right after a space.
    return cleaned[:max_len].rstrip()
