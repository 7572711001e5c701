"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- NewsApiConfig: Upstream News API endpoint and credentials
- CacheConfig: Headline cache TTL and size bound
- LoggingConfig: Logging behavior
- ServerConfig: Page settings for the web app
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import os
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

CONFIG_PATH_ENV = "TOP_HEADLINES_CONFIG"


@dataclass
class NewsApiConfig:
    """Configuration for The News API.

    Attributes:
        base_url: Endpoint for top stories
        api_token: Optional inline API token (overrides env var)
        api_token_env: Environment variable name containing the API token
        page_size: Number of articles requested per page (sent as `limit`)
        timeout_seconds: Request timeout, None keeps the httpx default
        trust_env: Whether to respect system proxy settings
    """

    base_url: str = "https://api.thenewsapi.com/v1/news/top"
    api_token: str | None = None
    api_token_env: str = "NEWS_API_TOKEN"
    page_size: int = 3
    timeout_seconds: float | None = None
    trust_env: bool = True


@dataclass
class CacheConfig:
    """Configuration for the in-memory headline cache.

    Attributes:
        ttl_hours: Hours an entry stays valid after it is written
        max_entries: Maximum number of cached selections
    """

    ttl_hours: float = 24
    max_entries: int = 100


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        dir: Directory for the log file, None disables file output
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "headlines.jsonl"
    dir: str | None = None


@dataclass
class ServerConfig:
    """Configuration for the headlines page.

    Attributes:
        title: Page title shown in the browser and header
    """

    title: str = "Top Headlines"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    news: NewsApiConfig = field(default_factory=NewsApiConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def load_runtime_config(path: str | None = None) -> AppConfig:
    """Load .env from the working directory, then the YAML config.

    The config path falls back to the TOP_HEADLINES_CONFIG environment variable.
    """
    load_dotenv(find_dotenv(usecwd=True))
    return load_config(path or os.getenv(CONFIG_PATH_ENV))


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        news=NewsApiConfig(**data["news"]),
        cache=CacheConfig(**data["cache"]),
        logging=LoggingConfig(**data["logging"]),
        server=ServerConfig(**data["server"]),
    )


def get_api_token(cfg: NewsApiConfig) -> str:
    """Get API token from inline config or environment variable.

    A missing token is returned as "" and left to fail at the request.
    """
    if cfg.api_token:
        return cfg.api_token
    return os.getenv(cfg.api_token_env, "")
