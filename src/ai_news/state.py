"""Reader view state and the pure reducer that advances it.

Every user gesture and every fetch lifecycle event is an action. ``reduce``
never mutates its input: it returns the same snapshot when nothing changes
and a copy otherwise, so each transition can be tested without rendering.

Fetch results carry the generation token handed out by :class:`FetchStarted`.
Only the newest generation may touch the article batch, the error or the
loading flag; late answers to superseded requests are dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from ai_news.filtering import filter_articles
from ai_news.news.classifier import ALL_TOPICS, TOPICS
from ai_news.news.models import Article

logger = logging.getLogger(__name__)


class ViewState(BaseModel):
    """Immutable snapshot of everything the reader displays."""

    model_config = ConfigDict(frozen=True)

    articles: tuple[Article, ...] = ()
    loading: bool = False
    error: str | None = None
    generation: int = 0
    dark_mode: bool = True
    topic: str = ALL_TOPICS
    query: str = ""
    selected: Article | None = None
    name: str = ""
    email: str = ""
    subscribed: bool = False

    @property
    def visible(self) -> list[Article]:
        """Articles passing the active topic and search filters."""
        return filter_articles(self.articles, self.topic, self.query)


# ----------------------------------------------------------------------
# Actions
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class SelectTopic:
    topic: str


@dataclass(frozen=True)
class SetQuery:
    query: str


@dataclass(frozen=True)
class SelectArticle:
    article_id: int


@dataclass(frozen=True)
class CloseArticle:
    pass


@dataclass(frozen=True)
class SetName:
    name: str


@dataclass(frozen=True)
class SetEmail:
    email: str


@dataclass(frozen=True)
class SubmitSubscription:
    """Acknowledge a newsletter signup locally; nothing is sent anywhere."""


@dataclass(frozen=True)
class DismissToast:
    pass


@dataclass(frozen=True)
class ClearFilters:
    pass


@dataclass(frozen=True)
class FetchStarted:
    """A new request went out; it becomes the only generation allowed to land."""


@dataclass(frozen=True)
class FetchSucceeded:
    generation: int
    articles: tuple[Article, ...]


@dataclass(frozen=True)
class FetchFailed:
    generation: int
    message: str


@dataclass(frozen=True)
class FetchFinished:
    """Cleanup for a request, sent whether it succeeded, failed or raised."""

    generation: int


Action = (
    ToggleTheme
    | SelectTopic
    | SetQuery
    | SelectArticle
    | CloseArticle
    | SetName
    | SetEmail
    | SubmitSubscription
    | DismissToast
    | ClearFilters
    | FetchStarted
    | FetchSucceeded
    | FetchFailed
    | FetchFinished
)


# ----------------------------------------------------------------------
# Reducer
# ----------------------------------------------------------------------


def reduce(state: ViewState, action: Action) -> ViewState:  # noqa: PLR0911, PLR0912
    """Return the state that follows *state* after *action*."""
    if isinstance(action, ToggleTheme):
        return state.model_copy(update={"dark_mode": not state.dark_mode})

    if isinstance(action, SelectTopic):
        if action.topic not in TOPICS:
            msg = f"Unknown topic {action.topic!r}; expected one of {', '.join(TOPICS)}"
            raise ValueError(msg)
        return state.model_copy(update={"topic": action.topic})

    if isinstance(action, SetQuery):
        return state.model_copy(update={"query": action.query})

    if isinstance(action, SelectArticle):
        for article in state.articles:
            if article.id == action.article_id:
                return state.model_copy(update={"selected": article})
        return state

    if isinstance(action, CloseArticle):
        return state.model_copy(update={"selected": None})

    if isinstance(action, SetName):
        return state.model_copy(update={"name": action.name})

    if isinstance(action, SetEmail):
        return state.model_copy(update={"email": action.email})

    if isinstance(action, SubmitSubscription):
        if not state.name.strip() or not state.email.strip():
            return state
        return state.model_copy(update={"subscribed": True, "name": "", "email": ""})

    if isinstance(action, DismissToast):
        return state.model_copy(update={"subscribed": False})

    if isinstance(action, ClearFilters):
        return state.model_copy(update={"topic": ALL_TOPICS, "query": ""})

    if isinstance(action, FetchStarted):
        return state.model_copy(update={"generation": state.generation + 1, "loading": True, "error": None})

    if isinstance(action, FetchSucceeded | FetchFailed | FetchFinished) and action.generation != state.generation:
        logger.debug("Dropping %s for stale generation %d", type(action).__name__, action.generation)
        return state

    if isinstance(action, FetchSucceeded):
        return state.model_copy(update={"articles": tuple(action.articles), "error": None})

    if isinstance(action, FetchFailed):
        return state.model_copy(update={"error": action.message})

    if isinstance(action, FetchFinished):
        return state.model_copy(update={"loading": False})

    msg = f"Unsupported action: {action!r}"
    raise TypeError(msg)
