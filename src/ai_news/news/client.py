"""NewsAPI ``everything`` endpoint client.

Performs a single GET per search and hands back the raw ``articles`` list.
Every way the request can go wrong collapses into :class:`IngestionFailure`
so callers only have one error to handle.
"""

import http.client
import json
import logging
import os
import urllib.error
import urllib.parse
import urllib.request
from typing import Any

from ai_news.config import NewsConfig

logger = logging.getLogger(__name__)


class IngestionFailure(RuntimeError):
    """Fetching or parsing a batch of articles failed.

    ``status`` is the HTTP status when the server answered, ``code`` the
    NewsAPI error code (e.g. ``apiKeyInvalid``) when the body carried one.
    """

    def __init__(self, message: str, *, status: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.code = code


class NewsAPIClient:
    """Thin wrapper around the NewsAPI search endpoint.

    All network access goes through :meth:`_get_json` so tests only need to
    patch ``urllib.request.urlopen``.
    """

    def __init__(self, config: NewsConfig | None = None, *, api_key: str | None = None) -> None:
        self._config = config if config is not None else NewsConfig()
        self._api_key = api_key if api_key is not None else os.environ.get(self._config.api_key_env, "")
        if not self._api_key:
            logger.warning("%s not set; NewsAPI will reject requests", self._config.api_key_env)

    def build_url(self, query: str) -> str:
        """Return the request URL for *query* with the fixed search parameters."""
        params = {
            "q": query,
            "language": self._config.language,
            "sortBy": self._config.sort_by,
            "pageSize": str(self._config.page_size),
            "apiKey": self._api_key,
        }
        return f"{self._config.endpoint}?{urllib.parse.urlencode(params)}"

    def search(self, query: str) -> list[dict[str, Any]]:
        """Return the raw article objects for *query*."""
        url = self.build_url(query)
        logger.debug("GET %s", url)
        payload = self._get_json(url)

        if payload.get("status") == "error":
            code = payload.get("code")
            msg = f"NewsAPI error: {payload.get('message') or code or 'unknown error'}"
            raise IngestionFailure(msg, code=code)

        articles = payload.get("articles")
        if not isinstance(articles, list):
            raise IngestionFailure("NewsAPI response has no article list")
        logger.info("NewsAPI returned %d articles for %r", len(articles), query)
        return articles

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get_json(self, url: str) -> dict[str, Any]:
        req = urllib.request.Request(url, headers={"Accept": "application/json"}, method="GET")
        try:
            with urllib.request.urlopen(req, timeout=self._config.timeout) as resp:  # noqa: S310
                body = resp.read()
        except urllib.error.HTTPError as exc:
            code = _error_code(exc)
            msg = f"Failed to load news (HTTP {exc.code})"
            raise IngestionFailure(msg, status=exc.code, code=code) from exc
        except (OSError, http.client.HTTPException) as exc:
            msg = f"Failed to load news: {getattr(exc, 'reason', exc)}"
            raise IngestionFailure(msg) from exc

        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise IngestionFailure("Failed to load news: response is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise IngestionFailure("Failed to load news: unexpected response shape")
        return payload


def _error_code(exc: urllib.error.HTTPError) -> str | None:
    """Pull the NewsAPI ``code`` out of an error response body, if any."""
    try:
        body = json.loads(exc.read() or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError, OSError):
        return None
    code = body.get("code") if isinstance(body, dict) else None
    return code if isinstance(code, str) else None
