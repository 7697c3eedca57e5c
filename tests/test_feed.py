"""Tests for the feed controller."""

import pytest
from ai_news.config import AppConfig, NewsConfig, UIConfig
from ai_news.feed import NewsFeed
from ai_news.news.client import IngestionFailure, NewsAPIClient
from ai_news.news.ingest import build_articles
from ai_news.state import SelectTopic


def _raw(title, published="2024-07-01T09:00:00Z"):
    return {"title": title, "description": None, "publishedAt": published, "url": "https://e.com", "source": {}}


class FakeProvider:
    """Records queries and replays canned batches or failures."""

    def __init__(self, *responses):
        self.queries = []
        self._responses = list(responses)

    def search(self, query):
        self.queries.append(query)
        response = self._responses.pop(0) if self._responses else []
        if isinstance(response, Exception):
            raise response
        return response


def _feed(*responses, config=None):
    provider = FakeProvider(*responses)
    return NewsFeed(config=config or AppConfig(), provider=provider), provider


def test_initial_state_uses_ui_config():
    feed, _ = _feed(config=AppConfig(ui=UIConfig(dark_mode=False)))
    assert feed.state.dark_mode is False
    assert feed.state.articles == ()


def test_fetch_loads_articles_with_default_query():
    feed, provider = _feed([_raw("ChatGPT tips"), _raw("Robot chef")])
    assert feed.fetch() is True
    assert provider.queries == ["artificial intelligence"]
    assert [a.title for a in feed.state.articles] == ["ChatGPT tips", "Robot chef"]
    assert [a.category for a in feed.state.articles] == ["GPT", "Robotics"]
    assert feed.state.loading is False
    assert feed.state.error is None


def test_fetch_uses_configured_default_query():
    feed, provider = _feed([], config=AppConfig(news=NewsConfig(default_query="llm")))
    feed.fetch("")
    assert provider.queries == ["llm"]


def test_failure_keeps_previous_articles():
    feed, _ = _feed([_raw("First batch")], IngestionFailure("Failed to load news (HTTP 503)", status=503))
    feed.fetch()
    assert feed.fetch("quantum") is False
    assert [a.title for a in feed.state.articles] == ["First batch"]
    assert feed.state.error == "Failed to load news (HTTP 503)"
    assert feed.state.loading is False


def test_loading_goes_true_then_false():
    seen = []

    class WatchingProvider:
        def search(self, query):
            seen.append(feed.state.loading)
            raise IngestionFailure("down")

    feed = NewsFeed(provider=WatchingProvider())
    feed.fetch()
    assert seen == [True]
    assert feed.state.loading is False


def test_unexpected_error_still_clears_loading():
    feed, _ = _feed(KeyError("boom"))
    with pytest.raises(KeyError):
        feed.fetch()
    assert feed.state.loading is False


def test_success_after_failure_clears_error():
    feed, _ = _feed(IngestionFailure("down"), [_raw("Back up")])
    feed.fetch()
    feed.fetch()
    assert feed.state.error is None
    assert [a.title for a in feed.state.articles] == ["Back up"]


def test_short_search_filters_only():
    feed, provider = _feed([_raw("AI wins chess"), _raw("Robot chef")])
    feed.fetch()
    assert feed.search("ch") is False
    assert provider.queries == ["artificial intelligence"]
    assert feed.state.query == "ch"
    assert len(feed.state.visible) == 2


def test_long_search_refetches_once():
    feed, provider = _feed([_raw("AI wins chess")], [_raw("Robot chef")])
    feed.fetch()
    assert feed.search("robot") is True
    assert provider.queries == ["artificial intelligence", "robot"]
    assert [a.title for a in feed.state.visible] == ["Robot chef"]


def test_quick_search_behaves_like_typing():
    feed, provider = _feed([_raw("ChatGPT update")])
    feed.quick_search("ChatGPT")
    assert provider.queries == ["ChatGPT"]
    assert feed.state.query == "ChatGPT"


def test_clear_filters_resets_and_reloads():
    feed, provider = _feed([_raw("Robot chef")], [_raw("Default batch")])
    feed.search("robot")
    feed.dispatch(SelectTopic(topic="Robotics"))
    feed.clear_filters()
    assert feed.state.topic == "All"
    assert feed.state.query == ""
    assert provider.queries == ["robot", "artificial intelligence"]


def test_out_of_order_completion_keeps_newest():
    feed, _ = _feed()
    slow = feed.begin_fetch()
    fast = feed.begin_fetch()

    feed.complete_fetch(fast, build_articles([_raw("Newest")]))
    feed.finish_fetch(fast)
    feed.complete_fetch(slow, build_articles([_raw("Stale")]))
    feed.finish_fetch(slow)

    assert [a.title for a in feed.state.articles] == ["Newest"]
    assert feed.state.loading is False


def test_stale_failure_is_ignored():
    feed, _ = _feed()
    slow = feed.begin_fetch()
    fast = feed.begin_fetch()
    feed.fail_fetch(slow, "late")
    feed.finish_fetch(slow)
    assert feed.state.error is None
    assert feed.state.loading is True
    feed.finish_fetch(fast)
    assert feed.state.loading is False


def test_default_provider_is_newsapi_client(monkeypatch):
    monkeypatch.setenv("NEWS_API_KEY", "k")
    feed = NewsFeed()
    assert isinstance(feed._provider, NewsAPIClient)


@pytest.mark.parametrize(
    "bad_result",
    [
        {"title": 42, "description": None, "publishedAt": "2024-07-02T09:00:00Z"},
        {"title": "Fine", "description": ["list"], "publishedAt": "2024-07-02T09:00:00Z"},
        {"title": "Fine", "content": 1, "publishedAt": "2024-07-02T09:00:00Z"},
        {"title": "Fine", "source": {"name": 5}, "publishedAt": "2024-07-02T09:00:00Z"},
    ],
)
def test_malformed_result_keeps_previous_articles(bad_result):
    feed, _ = _feed([_raw("First batch")], [_raw("Good"), bad_result])
    feed.fetch()
    assert feed.fetch("quantum") is False
    assert [a.title for a in feed.state.articles] == ["First batch"]
    assert "article 2" in feed.state.error
    assert feed.state.loading is False


def test_whitespace_search_is_sent_as_typed():
    feed, provider = _feed([])
    assert feed.search("   ") is True
    assert provider.queries == ["   "]
