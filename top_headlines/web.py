"""
FastAPI app serving the headlines page.

Routes:
- GET /news: server-rendered HTML page for (locale, category, page)
- GET /api/news: same selection as JSON
- GET /api/health: liveness check

Upstream failures never change the status code; they render as an empty page.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel

from .config import AppConfig, load_runtime_config
from .logging_utils import setup_logging
from .query import normalize
from .renderer import render_page
from .service import NewsService, build_service


class ArticleResponse(BaseModel):
    title: str
    description: str
    url: str
    image_url: str
    published_at: str
    source: str


def create_app(service: NewsService | None = None, cfg: AppConfig | None = None) -> FastAPI:
    """Build the FastAPI app around a NewsService.

    Without an explicit cfg this is the ASGI factory entry point: it loads
    .env and the YAML file named by TOP_HEADLINES_CONFIG, then sets up logging.
    """
    if cfg is None:
        cfg = load_runtime_config()
        setup_logging(cfg.logging)
    news = service or build_service(cfg)

    app = FastAPI(
        title=cfg.server.title,
        description="Top news headlines by region and category.",
        version="0.1.0",
    )
    app.state.news_service = news

    @app.get("/", include_in_schema=False)
    def index() -> RedirectResponse:
        return RedirectResponse(url="/news")

    @app.get("/api/health")
    def health() -> dict:
        return {"status": "ok"}

    # Plain def: the upstream GET blocks, so these run in the threadpool.
    @app.get("/news", response_class=HTMLResponse)
    def news_page(
        locale: Optional[str] = Query(None, description="Region code, e.g. 'us' or 'gb'."),
        category: Optional[str] = Query(None, description="Category code, e.g. 'business'."),
        page: Optional[str] = Query(None, description="Page number, 1-based."),
    ) -> HTMLResponse:
        selection = normalize(locale, category, page)
        articles = news.fetch(selection)
        return HTMLResponse(render_page(articles, selection, title=cfg.server.title))

    @app.get("/api/news", response_model=List[ArticleResponse])
    def news_json(
        locale: Optional[str] = Query(None),
        category: Optional[str] = Query(None),
        page: Optional[str] = Query(None),
    ) -> List[ArticleResponse]:
        articles = news.get_articles(locale, category, page)
        return [ArticleResponse(**article.to_dict()) for article in articles]

    return app
