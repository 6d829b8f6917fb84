"""Exception hierarchy shared by the loader, selector and CLI."""

from __future__ import annotations

LOAD_FAILURE_MESSAGE = "Failed to fetch data. Please try again later."


class RandbatsViewerError(Exception):
    """Base class for all errors raised by randbatsviewer."""


class DataLoadFailure(RandbatsViewerError):
    """Catalog could not be fetched or decoded.

    ``detail`` keeps the underlying cause for logs; ``str()`` is the
    user-facing message.
    """

    def __init__(self, detail: str = "") -> None:
        super().__init__(LOAD_FAILURE_MESSAGE)
        self.detail = detail


class SelectorUnavailable(RandbatsViewerError):
    """Selector was constructed from a failed load and refuses to operate."""


class UnknownCategory(RandbatsViewerError, ValueError):
    """Requested category is not present in the loaded catalog."""

    def __init__(self, category: str) -> None:
        super().__init__(f"Unknown category: {category!r}")
        self.category = category
