"""
Command-line interface for Top Headlines.

Uses Typer to fetch headlines for a selection, print them as a table or
write the rendered page to disk. Supports loading .env files for the
News API token.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import AppConfig, load_runtime_config
from .logging_utils import setup_logging
from .options import CATEGORIES, REGIONS
from .query import normalize
from .renderer import write_page
from .service import build_service

app = typer.Typer(add_completion=False)
console = Console()


def _prepare(
    config: Path | None,
    api_token: str | None,
    log_level: str | None,
    log_dir: Path | None = None,
) -> AppConfig:
    cfg = load_runtime_config(str(config) if config else None)
    if api_token:
        cfg.news.api_token = api_token
    if log_level:
        cfg.logging.level = log_level
    if log_dir is not None:
        cfg.logging.dir = str(log_dir)
        cfg.logging.file = True
    setup_logging(cfg.logging)
    return cfg


@app.command()
def headlines(
    locale: str | None = typer.Option(None, "--locale", "-l", help="Region code, e.g. us or gb."),
    category: str | None = typer.Option(None, "--category", "-c", help="Category code, e.g. business."),
    page: int = typer.Option(1, "--page", "-p", help="Page number, 1-based."),
    config: Path | None = typer.Option(None, "--config", exists=True, help="YAML config file."),
    api_token: str | None = typer.Option(
        None,
        "--api-token",
        envvar="NEWS_API_TOKEN",
        help="Override the News API token (or set NEWS_API_TOKEN / .env).",
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_dir: Path | None = typer.Option(None, "--log-dir", help="Write a log file to this directory."),
):
    """Print the top headlines for a region, category and page."""
    cfg = _prepare(config, api_token, log_level, log_dir)
    selection = normalize(locale, category, page)
    articles = build_service(cfg).fetch(selection)

    if not articles:
        console.print(f"No headlines for {selection.region}/{selection.category} page {selection.page}.")
        return

    table = Table(title=f"{selection.region} / {selection.category} / page {selection.page}")
    table.add_column("Title")
    table.add_column("Source")
    table.add_column("Published")
    table.add_column("URL", overflow="fold")
    for article in articles:
        table.add_row(article.title, article.source, article.published_at, article.url)
    console.print(table)


@app.command()
def render(
    output: Path = typer.Option(Path("news.html"), "--output", "-o", help="Where to write the page."),
    locale: str | None = typer.Option(None, "--locale", "-l"),
    category: str | None = typer.Option(None, "--category", "-c"),
    page: int = typer.Option(1, "--page", "-p"),
    config: Path | None = typer.Option(None, "--config", exists=True),
    api_token: str | None = typer.Option(None, "--api-token", envvar="NEWS_API_TOKEN"),
    log_level: str | None = typer.Option(None, "--log-level"),
    log_dir: Path | None = typer.Option(None, "--log-dir"),
):
    """Render the headlines page to an HTML file."""
    cfg = _prepare(config, api_token, log_level, log_dir)
    selection = normalize(locale, category, page)
    articles = build_service(cfg).fetch(selection)
    write_page(articles, selection, output, title=cfg.server.title)
    console.print(f"Page written: {output} ({len(articles)} articles)")


@app.command()
def options():
    """List known region and category codes."""
    table = Table(title="Regions")
    table.add_column("Code")
    table.add_column("Name")
    for code, name in REGIONS.items():
        table.add_row(code, name)
    console.print(table)

    table = Table(title="Categories")
    table.add_column("Code")
    table.add_column("Name")
    for code, name in CATEGORIES.items():
        table.add_row(code, name)
    console.print(table)


if __name__ == "__main__":
    app()
