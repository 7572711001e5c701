"""
Top Headlines - cached news headlines page.

This package serves a small server-rendered page of top news headlines
filtered by region, category and page, backed by The News API and an
in-memory TTL cache.

Main entry points are the FastAPI app (`top_headlines.web:create_app`) and
the `top-headlines` CLI.

Example:
    $ top-headlines headlines --locale gb --category technology --page 2
"""

__all__ = ["__version__", "Article", "Selection", "NewsService", "normalize"]
__version__ = "0.1.0"

from .query import normalize
from .service import NewsService
from .types import Article, Selection
