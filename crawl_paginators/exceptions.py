"""Pagination exceptions."""


class PaginationError(Exception):
    """Base class for errors raised while computing the next page."""

    def __init__(self, value: str, reason: str | None = None):
        self.value = value
        self.reason = reason or "invalid input"
        super().__init__(f"{self.reason}: {value!r}")


class URLParseError(PaginationError):
    """Raised when the current URL or an extracted reference is malformed."""


class QueryParseError(PaginationError):
    """Raised when a query string cannot be decoded or re-encoded."""
