"""NewsProvider protocol defining the search interface."""

from typing import Any, Protocol


class NewsProvider(Protocol):
    """Structural protocol for article search backends.

    ``search`` returns the raw result objects of one request, in the order
    the backend ranked them, or raises :class:`IngestionFailure`.
    """

    def search(self, query: str) -> list[dict[str, Any]]: ...
