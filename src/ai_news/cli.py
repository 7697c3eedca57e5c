"""CLI entry point for ai-news."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from ai_news import __version__
from ai_news.config import AppConfig, load_config
from ai_news.feed import NewsFeed
from ai_news.monitoring.logging import setup_logging
from ai_news.news.classifier import TOPICS
from ai_news.render import render_detail, render_list, render_toast
from ai_news.state import (
    CloseArticle,
    DismissToast,
    SelectArticle,
    SelectTopic,
    SetEmail,
    SetName,
    SubmitSubscription,
    ToggleTheme,
    ViewState,
    reduce,
)

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ai-news {__version__}")
        raise typer.Exit()


app = typer.Typer(name="ai-news", help="AI News — latest artificial-intelligence headlines in your terminal")


@app.callback()
def main(
    version: Annotated[
        bool, typer.Option("--version", "-V", help="Show version and exit", callback=_version_callback, is_eager=True)
    ] = False,
) -> None:
    """AI News — latest artificial-intelligence headlines in your terminal."""


DEFAULT_CONFIG = Path("config.yaml")

ConfigOption = Annotated[Path, typer.Option("--config", "-c", help="Path to config.yaml")]
QueryOption = Annotated[str | None, typer.Option("--query", "-q", help="Search query sent to NewsAPI")]

BROWSE_HELP = """\
Type any text to search (3+ characters also fetch fresh results).
  :topic NAME   filter by topic (All, GPT, NLP, ...)
  :open ID      read an article
  :back         return to the list
  :quick N      run quick search N (see :topics)
  :topics       list topics and quick searches
  :clear        reset filters and reload
  :theme        toggle dark/light colours
  :subscribe    sign up for the newsletter
  :help         show this help
  :quit         leave"""


def _load_config(config_path: Path) -> AppConfig:
    """Load config from file, warning if the file does not exist."""
    if config_path.exists():
        return load_config(config_path)
    logger.warning("Config file %s not found, using defaults", config_path)
    return AppConfig()


def _build_feed(config_path: Path) -> NewsFeed:
    cfg = _load_config(config_path)
    setup_logging(cfg.monitoring)
    return NewsFeed(config=cfg)


def _fetch_or_exit(feed: NewsFeed, query: str | None) -> None:
    if not feed.fetch(query):
        typer.echo(f"Error loading news: {feed.state.error}", err=True)
        raise typer.Exit(code=1)


def _render_topics(quick_topics: list[str]) -> str:
    lines = ["Topics:"]
    lines.extend(f"  {topic}" for topic in TOPICS)
    lines.append("Quick searches:")
    lines.extend(f"  {i}. #{topic}" for i, topic in enumerate(quick_topics, start=1))
    return "\n".join(lines)


@app.command()
def headlines(
    query: QueryOption = None,
    topic: Annotated[str, typer.Option("--topic", "-t", help="Only show this topic")] = "All",
    config: ConfigOption = DEFAULT_CONFIG,
) -> None:
    """Fetch and list the latest articles."""
    feed = _build_feed(config)
    try:
        feed.dispatch(SelectTopic(topic=topic))
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    _fetch_or_exit(feed, query)
    typer.echo(render_list(feed.state))


@app.command()
def read(
    article_id: Annotated[int, typer.Argument(help="Article number as shown by 'headlines'")],
    query: QueryOption = None,
    config: ConfigOption = DEFAULT_CONFIG,
) -> None:
    """Fetch the latest articles and show one in full."""
    feed = _build_feed(config)
    _fetch_or_exit(feed, query)
    state = feed.dispatch(SelectArticle(article_id=article_id))
    if state.selected is None:
        typer.echo(f"No article with id {article_id} (loaded {len(state.articles)})", err=True)
        raise typer.Exit(code=1)
    typer.echo(render_detail(state.selected, dark_mode=state.dark_mode))


@app.command()
def topics(config: ConfigOption = DEFAULT_CONFIG) -> None:
    """List the topic filters and quick searches."""
    typer.echo(_render_topics(_load_config(config).ui.quick_topics))


@app.command()
def subscribe(
    name: Annotated[str, typer.Option("--name", help="Your name")] = "",
    email: Annotated[str, typer.Option("--email", help="Your email address")] = "",
) -> None:
    """Sign up for the newsletter (acknowledged locally, nothing is sent)."""
    state = reduce(ViewState(name=name, email=email), SubmitSubscription())
    if not state.subscribed:
        typer.echo("Name and email are both required", err=True)
        raise typer.Exit(code=1)
    typer.echo(render_toast())


@app.command()
def browse(config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Interactive reader: search, filter by topic and open articles."""
    feed = _build_feed(config)
    feed.fetch()
    typer.echo(render_list(feed.state))
    typer.echo("Type :help for commands.")
    while True:
        try:
            line = typer.prompt("ai-news", default="", show_default=False, prompt_suffix="> ")
        except typer.Abort:
            break
        if not handle_line(feed, line):
            break


def handle_line(feed: NewsFeed, line: str) -> bool:  # noqa: PLR0911, PLR0912
    """Apply one line of interactive input. Returns False when the session should end."""
    if not line.startswith(":"):
        feed.search(line)
        typer.echo(render_list(feed.state))
        return True

    command, _, arg = line[1:].strip().partition(" ")
    arg = arg.strip()

    if command in ("quit", "q"):
        return False

    if command == "help":
        typer.echo(BROWSE_HELP)
    elif command == "topics":
        typer.echo(_render_topics(feed.quick_topics))
    elif command == "topic":
        try:
            feed.dispatch(SelectTopic(topic=arg or "All"))
        except ValueError as exc:
            typer.echo(str(exc))
            return True
        typer.echo(render_list(feed.state))
    elif command == "open":
        if not arg.isdigit():
            typer.echo("Usage: :open ID")
            return True
        feed.dispatch(CloseArticle())
        state = feed.dispatch(SelectArticle(article_id=int(arg)))
        if state.selected is None:
            typer.echo(f"No article with id {arg}")
            return True
        typer.echo(render_detail(state.selected, dark_mode=state.dark_mode))
    elif command == "back":
        feed.dispatch(CloseArticle())
        typer.echo(render_list(feed.state))
    elif command == "quick":
        quick = feed.quick_topics
        if not arg.isdigit() or not 1 <= int(arg) <= len(quick):
            typer.echo(f"Usage: :quick N (1-{len(quick)})")
            return True
        feed.quick_search(quick[int(arg) - 1])
        typer.echo(render_list(feed.state))
    elif command == "clear":
        feed.clear_filters()
        typer.echo(render_list(feed.state))
    elif command == "theme":
        state = feed.dispatch(ToggleTheme())
        typer.echo("Dark mode" if state.dark_mode else "Light mode")
    elif command == "subscribe":
        feed.dispatch(SetName(name=typer.prompt("Your name", default="", show_default=False)))
        feed.dispatch(SetEmail(email=typer.prompt("Your email", default="", show_default=False)))
        if feed.dispatch(SubmitSubscription()).subscribed:
            typer.echo(render_toast())
            feed.dispatch(DismissToast())
        else:
            typer.echo("Name and email are both required")
    else:
        typer.echo(f"Unknown command :{command}. Type :help for commands.")
    return True

