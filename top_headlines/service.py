"""
Cached headline fetching.

NewsService is the only component that talks to the upstream API. For each
Selection it:
1. Derives the cache key ("us-general-1")
2. Returns the cached article list on a hit
3. On a miss, issues one GET, parses the body and caches non-empty results

Every failure on the miss path (transport, status, malformed JSON, anything
unexpected) is logged and collapses to an empty list. `fetch` and
`get_articles` never raise.

Concurrent misses on the same key are not de-duplicated: both requests call
the API and the last write wins.
"""

from __future__ import annotations

import logging
from typing import Any

from .cache import TTLCache
from .config import AppConfig, get_api_token
from .fetcher import FetchResult, HttpxTransport, Transport
from .logging_utils import get_logger, log_event, redact_token
from .parser import parse_articles
from .query import cache_key, normalize
from .types import Article, Selection

SECONDS_PER_HOUR = 3600


class NewsService:
    """Cached fetcher for top stories.

    Attributes:
        base_url: Upstream endpoint for top stories
        api_token: Token sent as `api_token`, passed through even when empty
        page_size: Value sent as `limit`
        transport: HTTP collaborator performing the GET
        cache: Shared TTL cache of article lists keyed by selection
    """

    def __init__(
        self,
        base_url: str,
        api_token: str,
        transport: Transport,
        cache: TTLCache[tuple[Article, ...]],
        page_size: int = 3,
        logger: logging.Logger | None = None,
    ):
        self.base_url = base_url
        self.api_token = api_token
        self.transport = transport
        self.cache = cache
        self.page_size = page_size
        self.logger = logger or get_logger("service")

    def get_articles(self, region: str | None, category: str | None, page: Any = None) -> list[Article]:
        """Normalize raw inputs and return the matching articles."""
        return self.fetch(normalize(region, category, page))

    def fetch(self, selection: Selection) -> list[Article]:
        """Return the articles for a selection, from cache when possible."""
        key = cache_key(selection)
        cached = self.cache.get(key)
        if cached is not None:
            log_event(self.logger, "News cache hit", level=logging.DEBUG, event="news_cache_hit", key=key)
            return list(cached)

        log_event(self.logger, "News cache miss", level=logging.DEBUG, event="news_cache_miss", key=key)
        try:
            articles = self._fetch_live(selection, key)
        except Exception as exc:  # noqa: BLE001
            log_event(
                self.logger,
                "News fetch failed",
                level=logging.WARNING,
                event="news_fetch_failed",
                key=key,
                error=redact_token(f"{type(exc).__name__}: {exc}"),
            )
            return []

        if not articles:
            log_event(self.logger, "Empty news result not cached", event="news_cache_skip_empty", key=key)
            return []

        self.cache.put(key, tuple(articles))
        log_event(self.logger, "News cached", event="news_cache_store", key=key, count=len(articles))
        return articles

    def build_params(self, selection: Selection) -> dict[str, Any]:
        """Build the query parameters for the upstream request."""
        return {
            "api_token": self.api_token,
            "locale": selection.region,
            "categories": selection.category,
            "limit": self.page_size,
            "page": selection.page,
        }

    def _fetch_live(self, selection: Selection, key: str) -> list[Article]:
        result: FetchResult = self.transport.get(self.base_url, self.build_params(selection))
        if not result.ok:
            log_event(
                self.logger,
                "News fetch failed",
                level=logging.WARNING,
                event="news_fetch_failed",
                key=key,
                url=redact_token(result.url),
                status_code=result.status_code,
                error=redact_token(result.error or "empty body"),
            )
            return []

        try:
            return parse_articles(result.text or "")
        except ValueError as exc:
            log_event(
                self.logger,
                "News parse failed",
                level=logging.WARNING,
                event="news_parse_failed",
                key=key,
                error=str(exc),
            )
            return []


def build_service(cfg: AppConfig, transport: Transport | None = None) -> NewsService:
    """Wire a NewsService from configuration."""
    if transport is None:
        transport = HttpxTransport(timeout=cfg.news.timeout_seconds, trust_env=cfg.news.trust_env)
    cache: TTLCache[tuple[Article, ...]] = TTLCache(
        ttl_seconds=cfg.cache.ttl_hours * SECONDS_PER_HOUR,
        max_entries=cfg.cache.max_entries,
    )
    return NewsService(
        base_url=cfg.news.base_url,
        api_token=get_api_token(cfg.news),
        transport=transport,
        cache=cache,
        page_size=cfg.news.page_size,
    )
