"""Pydantic data models for NewsAPI article results."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict

from ai_news.news.classifier import classify_article

NO_DESCRIPTION = "No description available"
PLACEHOLDER_IMAGE = "https://images.unsplash.com/photo-1677442136019-21780ecad995?w=800&q=80"


def _str_field(data: dict[str, Any], key: str) -> str:
    """Extract an optional string field, defaulting to empty string.

    Raises :class:`ValueError` when the field is present but not a string.
    """
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"{key} must be a string, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def _parse_published(raw: Any) -> date:
    """Keep the calendar date of an ISO-8601 timestamp, dropping the time of day."""
    if not isinstance(raw, str) or not raw:
        msg = f"missing publishedAt: {raw!r}"
        raise ValueError(msg)
    return date.fromisoformat(raw.split("T", 1)[0])


class Article(BaseModel):
    """A normalized news article with its assigned topic."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    summary: str
    content: str
    image: str
    published_date: date
    source_name: str = ""
    url: str = ""
    category: str

    @classmethod
    def from_api(cls, data: dict[str, Any], *, article_id: int) -> "Article":
        """Build an article from one NewsAPI result, applying field fallbacks.

        Raises :class:`ValueError` when the result has no usable ``publishedAt``
        or a text field holds something other than a string.
        """
        title = _str_field(data, "title")
        description = _str_field(data, "description") or None
        summary = description or NO_DESCRIPTION
        source = data.get("source") or {}
        if not isinstance(source, dict):
            msg = f"source must be an object, got {type(source).__name__}"
            raise ValueError(msg)
        return cls(
            id=article_id,
            title=title,
            summary=summary,
            content=_str_field(data, "content") or summary,
            image=_str_field(data, "urlToImage") or PLACEHOLDER_IMAGE,
            published_date=_parse_published(data.get("publishedAt")),
            source_name=_str_field(source, "name"),
            url=_str_field(data, "url"),
            category=classify_article(title, description),
        )
