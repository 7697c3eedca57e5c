"""Turn one search request into a fresh batch of classified articles."""

import logging
from typing import Any

from pydantic import ValidationError

from ai_news.news.client import IngestionFailure
from ai_news.news.models import Article
from ai_news.news.provider import NewsProvider

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "artificial intelligence"


def resolve_query(query: str | None, *, default: str = DEFAULT_QUERY) -> str:
    """Return *query*, or *default* when it is missing or empty."""
    if not query:
        return default
    return query


def build_articles(raw_results: list[Any]) -> list[Article]:
    """Normalize raw results into articles with 1-based positional ids.

    Any malformed result fails the whole batch with :class:`IngestionFailure`.
    """
    articles: list[Article] = []
    for position, raw in enumerate(raw_results, start=1):
        if not isinstance(raw, dict):
            msg = f"Failed to read article {position}: expected an object, got {type(raw).__name__}"
            raise IngestionFailure(msg)
        try:
            articles.append(Article.from_api(raw, article_id=position))
        except (ValueError, ValidationError) as exc:
            msg = f"Failed to read article {position}: {exc}"
            raise IngestionFailure(msg) from exc
    return articles


def ingest(provider: NewsProvider, query: str | None = None, *, default_query: str = DEFAULT_QUERY) -> list[Article]:
    """Search *provider* and return the normalized, classified batch."""
    resolved = resolve_query(query, default=default_query)
    articles = build_articles(provider.search(resolved))
    logger.debug("Built %d articles for %r", len(articles), resolved)
    return articles
