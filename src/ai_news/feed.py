"""Feed controller — ties user gestures, the reducer and ingestion together."""

import logging

from ai_news.config import AppConfig
from ai_news.filtering import should_refetch
from ai_news.news.client import IngestionFailure, NewsAPIClient
from ai_news.news.ingest import ingest
from ai_news.news.models import Article
from ai_news.news.provider import NewsProvider
from ai_news.state import (
    Action,
    ClearFilters,
    FetchFailed,
    FetchFinished,
    FetchStarted,
    FetchSucceeded,
    SetQuery,
    ViewState,
    reduce,
)

logger = logging.getLogger(__name__)


class NewsFeed:
    """Own the current :class:`ViewState` and the news provider.

    :meth:`fetch` runs one complete request cycle. The individual steps
    (:meth:`begin_fetch`, :meth:`complete_fetch`, :meth:`fail_fetch`,
    :meth:`finish_fetch`) are public so that overlapping requests can be
    driven in any completion order; results tagged with a superseded
    generation are discarded by the reducer.
    """

    def __init__(self, config: AppConfig | None = None, *, provider: NewsProvider | None = None) -> None:
        self._config = config if config is not None else AppConfig()
        self._provider: NewsProvider = provider if provider is not None else NewsAPIClient(self._config.news)
        self._state = ViewState(dark_mode=self._config.ui.dark_mode)

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def quick_topics(self) -> list[str]:
        return list(self._config.ui.quick_topics)

    def dispatch(self, action: Action) -> ViewState:
        """Apply *action* to the current state and return the new state."""
        self._state = reduce(self._state, action)
        return self._state

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def begin_fetch(self) -> int:
        """Mark a request as in flight and return its generation token."""
        return self.dispatch(FetchStarted()).generation

    def complete_fetch(self, generation: int, articles: list[Article]) -> None:
        if generation != self._state.generation:
            logger.info("Discarding %d articles from superseded request %d", len(articles), generation)
        self.dispatch(FetchSucceeded(generation=generation, articles=tuple(articles)))

    def fail_fetch(self, generation: int, message: str) -> None:
        self.dispatch(FetchFailed(generation=generation, message=message))

    def finish_fetch(self, generation: int) -> None:
        self.dispatch(FetchFinished(generation=generation))

    def fetch(self, query: str | None = None) -> bool:
        """Replace the article batch with the results for *query*.

        Returns True on success. On :class:`IngestionFailure` the previous
        batch stays in place and the message is stored in ``state.error``.
        The loading flag is cleared however the request ends.
        """
        generation = self.begin_fetch()
        try:
            articles = ingest(self._provider, query, default_query=self._config.news.default_query)
        except IngestionFailure as exc:
            logger.warning(
                "News fetch failed: %s", exc, extra={"extra_data": {"status": exc.status, "code": exc.code}}
            )
            self.fail_fetch(generation, str(exc))
            return False
        else:
            self.complete_fetch(generation, articles)
            logger.info("Loaded %d articles", len(articles))
            return True
        finally:
            self.finish_fetch(generation)

    # ------------------------------------------------------------------
    # Gestures with side effects
    # ------------------------------------------------------------------

    def search(self, text: str) -> bool:
        """Update the search box; long enough input also refetches.

        Returns True when a new request was issued.
        """
        self.dispatch(SetQuery(query=text))
        if not should_refetch(text):
            return False
        self.fetch(text)
        return True

    def quick_search(self, topic: str) -> bool:
        """Behave exactly as if *topic* had been typed into the search box."""
        return self.search(topic)

    def clear_filters(self) -> None:
        """Reset topic and search text, then reload the default query."""
        self.dispatch(ClearFilters())
        self.fetch()
