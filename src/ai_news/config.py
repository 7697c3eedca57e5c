"""Configuration loading and validation."""

from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_QUICK_TOPICS = ["ChatGPT", "Machine Learning", "Deep Learning", "Computer Vision", "NLP"]


class NewsConfig(BaseModel):
    """NewsAPI request configuration.

    The API key itself never lives in the config file; only the name of the
    environment variable that holds it.
    """

    endpoint: str = "https://newsapi.org/v2/everything"
    language: str = "en"
    sort_by: str = "publishedAt"
    page_size: int = Field(default=20, ge=1, le=100)
    default_query: str = "artificial intelligence"
    api_key_env: str = "NEWS_API_KEY"
    timeout: float = 15.0


class UIConfig(BaseModel):
    """Reader presentation defaults."""

    dark_mode: bool = True
    quick_topics: list[str] = Field(default_factory=lambda: list(DEFAULT_QUICK_TOPICS))


class MonitoringConfig(BaseModel):
    """Logging configuration."""

    structured_logging: bool = False
    log_file: str | None = None
    log_level: str = "WARNING"


class AppConfig(BaseModel):
    """Top-level application configuration."""

    news: NewsConfig = Field(default_factory=NewsConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)


def load_config(path: Path) -> AppConfig:
    """Load config from a YAML file."""
    load_dotenv(path.parent / ".env", override=False)
    return AppConfig(**(yaml.safe_load(path.read_text()) or {}))
