from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .options import CATEGORIES, REGIONS, Pagination, category_name, region_name
from .types import Article, Selection

TEMPLATE_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
)


def http_url(value: str) -> str:
    """Return value if it is an absolute http(s) URL, else ""."""
    try:
        parts = urlsplit((value or "").strip())
    except ValueError:
        return ""
    if parts.scheme.lower() in ("http", "https") and parts.netloc:
        return value.strip()
    return ""


_env.filters["http_url"] = http_url


def render_page(articles: list[Article], selection: Selection, title: str = "Top Headlines") -> str:
    """Render the headlines page for one selection."""
    template = _env.get_template("news.html")
    return template.render(
        title=title,
        articles=articles,
        regions=REGIONS,
        categories=CATEGORIES,
        selected_region=selection.region,
        selected_category=selection.category,
        region_label=region_name(selection.region),
        category_label=category_name(selection.category),
        pagination=Pagination(selection.page),
        generated_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
    )


def write_page(articles: list[Article], selection: Selection, output_path: Path, title: str = "Top Headlines") -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_page(articles, selection, title), encoding="utf-8")
