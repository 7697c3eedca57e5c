"""Client-side topic and free-text filtering of the loaded article batch."""

from collections.abc import Iterable

from ai_news.news.classifier import ALL_TOPICS
from ai_news.news.models import Article

MIN_SEARCH_LENGTH = 3


def matches(article: Article, topic: str, query: str) -> bool:
    """Return True when *article* passes both the topic and the text filter."""
    if topic != ALL_TOPICS and article.category != topic:
        return False
    if not query:
        return True
    needle = query.lower()
    return needle in article.title.lower() or needle in article.summary.lower()


def filter_articles(articles: Iterable[Article], topic: str = ALL_TOPICS, query: str = "") -> list[Article]:
    """Return the articles matching *topic* and *query*, in their original order."""
    return [a for a in articles if matches(a, topic, query)]


def should_refetch(query: str) -> bool:
    """Search text this long also triggers a new request, not only local filtering."""
    return len(query) >= MIN_SEARCH_LENGTH
