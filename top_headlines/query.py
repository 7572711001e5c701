"""
Query normalization for headline selections.

Raw inputs come straight from a query string or CLI flag and may be missing,
blank or out of range. `normalize` turns them into a canonical Selection
before they reach the cache key or the upstream request. It never fails.
"""

from __future__ import annotations

from typing import Any

from .types import Selection

DEFAULT_REGION = "us"
DEFAULT_CATEGORY = "general"
DEFAULT_PAGE = 1


def normalize(raw_region: str | None, raw_category: str | None, raw_page: Any = None) -> Selection:
    """Convert raw selection inputs into a canonical Selection.

    Args:
        raw_region: Region/locale code, blank or None falls back to "us"
        raw_category: Category code, blank or None falls back to "general"
        raw_page: Page number; None, non-integers and values below 1 become 1

    Returns:
        Selection with non-blank region/category and page >= 1
    """
    return Selection(
        region=_text_or_default(raw_region, DEFAULT_REGION),
        category=_text_or_default(raw_category, DEFAULT_CATEGORY),
        page=_page_or_default(raw_page),
    )


def cache_key(selection: Selection) -> str:
    """Return the cache key for a selection, e.g. "us-business-1"."""
    return selection.cache_key


def _text_or_default(value: str | None, default: str) -> str:
    if value is None or not value.strip():
        return default
    return value


def _page_or_default(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return DEFAULT_PAGE
    try:
        page = int(str(value).strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError):
        return DEFAULT_PAGE
    return page if page >= 1 else DEFAULT_PAGE
