"""Plain-text views of the reader state for the terminal."""

import textwrap
from datetime import date

import typer

from ai_news.news.models import Article
from ai_news.state import ViewState

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WIDTH = 78


def format_date(value: date) -> str:
    """Long English date, e.g. ``March 1, 2024``, independent of the host locale."""
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def _accent(text: str, dark_mode: bool, *, bold: bool = False) -> str:
    color = typer.colors.BRIGHT_CYAN if dark_mode else typer.colors.BLUE
    return typer.style(text, fg=color, bold=bold)


def _badge(category: str, dark_mode: bool) -> str:
    color = typer.colors.BRIGHT_MAGENTA if dark_mode else typer.colors.MAGENTA
    return typer.style(f"[{category}]", fg=color)


def render_card(article: Article, *, dark_mode: bool = True) -> str:
    """One list entry: id, topic, date, headline and a clipped summary."""
    header = f"{article.id:>2}. {_badge(article.category, dark_mode)} {format_date(article.published_date)}"
    title = _accent(textwrap.shorten(article.title or "(untitled)", WIDTH - 4), dark_mode, bold=True)
    summary = textwrap.shorten(article.summary, WIDTH * 2 - 8, placeholder="...")
    body = textwrap.indent(textwrap.fill(summary, WIDTH - 4), "    ")
    return f"{header}\n    {title}\n{body}"


def render_list(state: ViewState) -> str:
    """The main page: error banner, loading notice or the filtered list."""
    lines: list[str] = []
    if state.error:
        lines.append(typer.style(f"Error loading news: {state.error}", fg=typer.colors.RED))
    if state.loading:
        lines.append("Loading news...")
        return "\n".join(lines)

    visible = state.visible
    if not visible:
        lines.append("No news found. Use :clear to reset the filters.")
        return "\n".join(lines)

    lines.append(f"Topic: {state.topic}" + (f" | Search: {state.query}" if state.query else ""))
    lines.extend(render_card(a, dark_mode=state.dark_mode) for a in visible)
    return "\n\n".join(lines)


def render_detail(article: Article, *, dark_mode: bool = True) -> str:
    """The reading view for a single article."""
    meta = f"{_badge(article.category, dark_mode)} {format_date(article.published_date)}"
    if article.source_name:
        meta += f" | Source: {article.source_name}"
    parts = [
        meta,
        _accent(article.title or "(untitled)", dark_mode, bold=True),
        textwrap.fill(article.summary, WIDTH),
        textwrap.fill(article.content, WIDTH),
        f"Image: {article.image}",
    ]
    if article.url:
        parts.append(f"Read the full article: {article.url}")
    return "\n\n".join(parts)


def render_toast() -> str:
    return typer.style("Subscribed successfully!", fg=typer.colors.GREEN, bold=True)
