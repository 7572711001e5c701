"""
Parse News API responses into Article objects.

The upstream body is a JSON object whose "data" field holds the list of
stories. A body without a usable "data" list simply has no articles; only a
body that is not valid JSON is an error.
"""

from __future__ import annotations

import json
from typing import Any

from .types import Article

# Article attribute -> upstream JSON field
FIELD_MAP = {
    "title": "title",
    "description": "description",
    "url": "url",
    "image_url": "image_url",
    "published_at": "published_at",
    "source": "source",
}


def parse_articles(text: str) -> list[Article]:
    """Parse a News API response body into articles.

    Args:
        text: Raw response body

    Returns:
        Articles in response order, one per "data" element (non-object
        elements become all-empty articles); empty when "data" is missing
        or not a list

    Raises:
        ValueError: If the body is not valid JSON
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in news response: {exc}") from exc

    if not isinstance(payload, dict):
        return []
    data = payload.get("data")
    if not isinstance(data, list):
        return []

    return [article_from_dict(item if isinstance(item, dict) else {}) for item in data]


def article_from_dict(item: dict[str, Any]) -> Article:
    """Build an Article, substituting "" for any missing or null field."""
    return Article(**{attr: _as_text(item.get(key)) for attr, key in FIELD_MAP.items()})


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
