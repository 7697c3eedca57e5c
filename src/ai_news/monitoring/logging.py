"""Logging setup for the ai-news reader.

Output always goes to stderr (plus an optional file) so log lines never mix
with articles rendered on stdout. NewsAPI keys travel in the request URL, so
every handler scrubs ``apiKey=...`` before a record is written.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ai_news.config import MonitoringConfig

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_API_KEY_RE = re.compile(r"(apiKey=)[^&\s]+", re.IGNORECASE)


def redact(text: str) -> str:
    """Replace NewsAPI key values in *text* with ``***``."""
    return _API_KEY_RE.sub(r"\1***", text)


class RedactAPIKeyFilter(logging.Filter):
    """Rewrite a record's rendered message with API keys masked."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        cleaned = redact(message)
        if cleaned != message:
            record.msg = cleaned
            record.args = None
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per line; ``extra={"extra_data": {...}}`` lands under ``data``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        extra_data = getattr(record, "extra_data", None)
        if extra_data is not None:
            entry["data"] = extra_data
        return json.dumps(entry, default=str)


def _install(formatter: logging.Formatter, *, log_file: Path | None, level: int | str) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_file)))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(RedactAPIKeyFilter())
        root.addHandler(handler)


def setup_structured_logging(*, log_file: Path | None = None, level: int | str = logging.INFO) -> None:
    """Configure the root logger with JSON output."""
    _install(JSONFormatter(), log_file=log_file, level=level)


def setup_logging(monitoring: MonitoringConfig) -> None:
    """Configure logging from the ``monitoring`` config section."""
    log_file = Path(monitoring.log_file) if monitoring.log_file else None
    level = monitoring.log_level.upper()
    if monitoring.structured_logging:
        setup_structured_logging(log_file=log_file, level=level)
    else:
        _install(logging.Formatter(PLAIN_FORMAT), log_file=log_file, level=level)
