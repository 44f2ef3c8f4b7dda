"""
Paginator interface (abstract base class).

A Paginator answers one question for a crawler: given the page that was just
fetched and parsed, which URL comes next? Implementations can be swapped or
stacked without changing the crawler logic.

The parsed document is supplied by the caller as a BeautifulSoup object or
Tag; strategies never mutate it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

from bs4 import BeautifulSoup, Tag

ParsedDocument = Union[BeautifulSoup, Tag]


class Paginator(ABC):
    """
    Abstract base class for pagination strategies.

    ``next_page`` returns the absolute URL of the next page, or an empty
    string when there is no further page. Malformed input raises a
    ``PaginationError`` subclass; running out of pages never does.
    """

    @abstractmethod
    def next_page(
        self,
        current_url: str,
        document: Optional[ParsedDocument] = None,
    ) -> str:
        """
        Get the next page URL.

        Args:
            current_url: Absolute URL of the page just fetched
            document: Parsed document of that page

        Returns:
            Absolute URL of the next page, or '' when pagination is complete

        Raises:
            URLParseError: A URL involved is malformed
            QueryParseError: The query string is malformed
        """
        pass

    def reset(self) -> None:
        """Reset pagination state to initial values (override if stateful)."""
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """Return current pagination state for debugging."""
        pass
