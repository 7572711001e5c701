"""Dropdown options and pagination for the headlines page."""

from __future__ import annotations

from dataclasses import dataclass

REGIONS: dict[str, str] = {
    "us": "United States",
    "gb": "United Kingdom",
    "au": "Australia",
    "ca": "Canada",
    "in": "India",
    "ie": "Ireland",
    "nz": "New Zealand",
    "sg": "Singapore",
}

CATEGORIES: dict[str, str] = {
    "general": "General",
    "business": "Business",
    "entertainment": "Entertainment",
    "health": "Health",
    "science": "Science",
    "sports": "Sports",
    "technology": "Technology",
}


def region_name(code: str) -> str:
    return REGIONS.get(code, code.upper())


def category_name(code: str) -> str:
    return CATEGORIES.get(code, code.title())


@dataclass(frozen=True)
class Pagination:
    """Previous/next page numbers around the current page."""
    current: int

    @property
    def previous(self) -> int:
        return self.current - 1

    @property
    def next(self) -> int:
        return self.current + 1

    @property
    def has_previous(self) -> bool:
        return self.current > 1
