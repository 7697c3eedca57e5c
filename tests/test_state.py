"""Tests for the view-state reducer."""

from datetime import date

import pytest
from ai_news.news.models import Article
from ai_news.state import (
    ClearFilters,
    CloseArticle,
    DismissToast,
    FetchFailed,
    FetchFinished,
    FetchStarted,
    FetchSucceeded,
    SelectArticle,
    SelectTopic,
    SetEmail,
    SetName,
    SetQuery,
    SubmitSubscription,
    ToggleTheme,
    ViewState,
    reduce,
)


def _article(article_id, title="Headline", category="GPT"):
    return Article(
        id=article_id,
        title=title,
        summary="Summary",
        content="Content",
        image="https://img.example.com/x.jpg",
        published_date=date(2024, 2, 1),
        category=category,
    )


BATCH = (_article(1, "ChatGPT news"), _article(2, "Robot news", "Robotics"))


def _loaded():
    state = reduce(ViewState(), FetchStarted())
    state = reduce(state, FetchSucceeded(generation=state.generation, articles=BATCH))
    return reduce(state, FetchFinished(generation=state.generation))


def test_initial_state():
    state = ViewState()
    assert state.articles == ()
    assert state.topic == "All"
    assert state.query == ""
    assert state.dark_mode is True
    assert state.loading is False
    assert state.selected is None


def test_reduce_does_not_mutate_input():
    state = ViewState()
    new = reduce(state, ToggleTheme())
    assert state.dark_mode is True
    assert new.dark_mode is False
    assert reduce(new, ToggleTheme()).dark_mode is True


def test_select_topic():
    assert reduce(ViewState(), SelectTopic(topic="NLP")).topic == "NLP"


def test_select_unknown_topic_raises():
    with pytest.raises(ValueError, match="Unknown topic"):
        reduce(ViewState(), SelectTopic(topic="Blockchain"))


def test_set_query_and_visible():
    state = reduce(_loaded(), SetQuery(query="robot"))
    assert state.query == "robot"
    assert [a.id for a in state.visible] == [2]


def test_visible_combines_topic_and_query():
    state = reduce(_loaded(), SelectTopic(topic="GPT"))
    assert [a.id for a in state.visible] == [1]
    state = reduce(state, SetQuery(query="robot"))
    assert state.visible == []


def test_select_and_close_article():
    state = reduce(_loaded(), SelectArticle(article_id=2))
    assert state.selected == BATCH[1]
    assert reduce(state, CloseArticle()).selected is None


def test_select_missing_article_is_noop():
    state = _loaded()
    assert reduce(state, SelectArticle(article_id=99)) is state


def test_subscription_requires_name_and_email():
    state = reduce(ViewState(), SetName(name="Ada"))
    assert reduce(state, SubmitSubscription()) is state
    state = reduce(reduce(ViewState(), SetName(name="  ")), SetEmail(email="ada@example.com"))
    assert reduce(state, SubmitSubscription()).subscribed is False


def test_subscription_success_clears_fields():
    state = reduce(reduce(ViewState(), SetName(name="Ada")), SetEmail(email="ada@example.com"))
    state = reduce(state, SubmitSubscription())
    assert state.subscribed is True
    assert state.name == ""
    assert state.email == ""
    assert reduce(state, DismissToast()).subscribed is False


def test_clear_filters():
    state = reduce(reduce(_loaded(), SelectTopic(topic="Robotics")), SetQuery(query="arm"))
    state = reduce(state, ClearFilters())
    assert state.topic == "All"
    assert state.query == ""
    assert len(state.articles) == 2


def test_fetch_started_bumps_generation_and_clears_error():
    state = ViewState(error="boom", generation=4)
    state = reduce(state, FetchStarted())
    assert state.generation == 5
    assert state.loading is True
    assert state.error is None


def test_fetch_succeeded_replaces_batch():
    state = _loaded()
    fresh = (_article(1, "Quantum news", "Quantum Computing"),)
    state = reduce(state, FetchStarted())
    state = reduce(state, FetchSucceeded(generation=state.generation, articles=fresh))
    assert state.articles == fresh


def test_fetch_failed_keeps_previous_batch():
    state = reduce(_loaded(), FetchStarted())
    state = reduce(state, FetchFailed(generation=state.generation, message="Failed to load news (HTTP 500)"))
    state = reduce(state, FetchFinished(generation=state.generation))
    assert state.articles == BATCH
    assert state.error == "Failed to load news (HTTP 500)"
    assert state.loading is False


def test_stale_results_are_discarded():
    state = reduce(ViewState(), FetchStarted())
    first = state.generation
    state = reduce(state, FetchStarted())
    second = state.generation

    newer = (_article(1, "Newer"),)
    older = (_article(1, "Older"),)
    state = reduce(state, FetchSucceeded(generation=second, articles=newer))
    state = reduce(state, FetchFinished(generation=second))
    state = reduce(state, FetchSucceeded(generation=first, articles=older))
    state = reduce(state, FetchFailed(generation=first, message="late failure"))
    state = reduce(state, FetchFinished(generation=first))

    assert state.articles == newer
    assert state.error is None
    assert state.loading is False


def test_stale_finish_does_not_clear_newer_loading():
    state = reduce(ViewState(), FetchStarted())
    first = state.generation
    state = reduce(state, FetchStarted())
    state = reduce(state, FetchFinished(generation=first))
    assert state.loading is True


def test_unsupported_action_raises():
    with pytest.raises(TypeError):
        reduce(ViewState(), object())  # type: ignore[arg-type]
