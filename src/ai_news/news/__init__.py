"""News ingestion package: NewsAPI client, normalization and topic tagging."""

from ai_news.news.classifier import ALL_TOPICS, CATEGORIES, TOPICS, classify
from ai_news.news.client import IngestionFailure, NewsAPIClient
from ai_news.news.models import Article
from ai_news.news.provider import NewsProvider

__all__ = [
    "ALL_TOPICS",
    "CATEGORIES",
    "TOPICS",
    "Article",
    "IngestionFailure",
    "NewsAPIClient",
    "NewsProvider",
    "classify",
]
