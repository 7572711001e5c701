"""
Core data types for Top Headlines.

This module defines the two values that flow through the headline pipeline:
- Article: A single normalized news item parsed from the upstream API
- Selection: The canonical (region, category, page) triple for one request
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

KEY_DELIMITER = "-"


@dataclass(frozen=True)
class Article:
    """A single news item.

    Every field is a string and defaults to "" so templates and callers never
    see None for a value the upstream response left out.

    Attributes:
        title: The article headline
        description: Short description or lede
        url: Link to the full story
        image_url: Link to the lead image, may be empty
        published_at: ISO-8601 publication timestamp, may be empty
        source: Publisher name or domain, may be empty
    """
    title: str = ""
    description: str = ""
    url: str = ""
    image_url: str = ""
    published_at: str = ""
    source: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Selection:
    """Canonical (region, category, page) triple.

    Build it with `top_headlines.query.normalize`, which guarantees region and
    category are non-blank and page is at least 1.
    """
    region: str
    category: str
    page: int

    @property
    def cache_key(self) -> str:
        """Region, category and page joined with "-", e.g. "us-business-1"."""
        return KEY_DELIMITER.join([self.region, self.category, str(self.page)])
