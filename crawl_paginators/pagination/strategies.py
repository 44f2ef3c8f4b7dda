"""
Pagination strategies for crawling.

Provides three composable approaches:
- Selector-based (follow the link found by a CSS selector)
- Query parameter based (?page=2 -> ?page=3)
- Page limiting (cap how far another strategy may advance)
"""

import logging
from typing import Any, Dict, Optional

import soupsieve

from ..exceptions import QueryParseError
from ..interfaces import Paginator, ParsedDocument
from ..utils import (
    MAX_PAGE_NUMBER,
    build_url,
    encode_query,
    parse_page_number,
    parse_query,
    parse_url,
    resolve_url,
)

logger = logging.getLogger(__name__)


class SelectorPaginator(Paginator):
    """
    Pagination by following a link found in the current document.

    The first element matching ``selector`` is looked up and its
    ``attribute`` is resolved against the current URL, so relative,
    scheme-relative and fragment-only references all come back absolute.

    The selector is compiled up front; an invalid one raises ValueError.
    """

    def __init__(self, selector: str, attribute: str = 'href'):
        try:
            self._pattern = soupsieve.compile(selector)
        except soupsieve.SelectorSyntaxError as e:
            raise ValueError(f"Invalid selector {selector!r}: {e}") from e
        self._selector = selector
        self._attribute = attribute

    @property
    def selector(self) -> str:
        return self._selector

    @property
    def attribute(self) -> str:
        return self._attribute

    def next_page(
        self,
        current_url: str,
        document: Optional[ParsedDocument] = None,
    ) -> str:
        """Find the next page link in the document."""
        value = self._extract(document)
        if value is None:
            logger.debug(
                f"No {self._attribute!r} found for selector {self._selector!r} "
                f"on {current_url}"
            )
            return ''

        # Make the URL absolute
        parse_url(current_url)
        parse_url(value)
        return resolve_url(current_url, value)

    def _extract(self, document: Optional[ParsedDocument]) -> Optional[str]:
        if document is None:
            return None

        element = self._pattern.select_one(document)
        if element is None:
            return None

        value = element.get(self._attribute)
        if value is None:
            return None
        # bs4 returns multi-valued attributes (rel, class) as lists
        if isinstance(value, list):
            value = ' '.join(value)
        return value.strip()

    def get_state(self) -> Dict[str, Any]:
        return {
            'type': 'selector',
            'selector': self._selector,
            'attribute': self._attribute,
        }

    def __repr__(self) -> str:
        return f"SelectorPaginator(selector={self._selector!r}, attribute={self._attribute!r})"


class QueryParamPaginator(Paginator):
    """
    Pagination by incrementing a numeric query parameter (e.g. ?page=2).

    The document is not consulted, so this strategy keeps producing URLs for
    as long as the parameter is present. Wrap it in a LimitingPaginator to
    bound the crawl.

    A parameter value that is not an unsigned integer ends pagination
    quietly. Pass ``strict=True`` to raise QueryParseError instead, which
    surfaces sites that changed their URL format.
    """

    def __init__(self, param_name: str, strict: bool = False):
        self._param_name = param_name
        self._strict = strict

    @property
    def param_name(self) -> str:
        return self._param_name

    @property
    def strict(self) -> bool:
        return self._strict

    def next_page(
        self,
        current_url: str,
        document: Optional[ParsedDocument] = None,
    ) -> str:
        """Generate next page URL using parameter increment."""
        parts = parse_url(current_url)
        params = parse_query(parts.query)

        # Find the first value of the parameter. If it doesn't exist, stop.
        index = next(
            (i for i, (name, _) in enumerate(params) if name == self._param_name),
            None,
        )
        if index is None:
            logger.debug(f"Parameter {self._param_name!r} not in {current_url}")
            return ''

        value = params[index][1]
        page = parse_page_number(value)
        if page is None:
            if self._strict:
                raise QueryParseError(
                    value, f"non-numeric value for parameter {self._param_name!r}"
                )
            logger.warning(
                f"Stopping pagination: parameter {self._param_name!r} "
                f"has non-numeric value {value!r} in {current_url}"
            )
            return ''

        if page >= MAX_PAGE_NUMBER:
            raise QueryParseError(
                value, f"parameter {self._param_name!r} would overflow"
            )

        # Put everything back together
        params[index] = (self._param_name, str(page + 1))
        return build_url(parts, encode_query(params))

    def get_state(self) -> Dict[str, Any]:
        return {
            'type': 'query_param',
            'param_name': self._param_name,
            'strict': self._strict,
        }

    def __repr__(self) -> str:
        return f"QueryParamPaginator(param_name={self._param_name!r}, strict={self._strict!r})"


class LimitingPaginator(Paginator):
    """
    Wrapper that limits how many pages another Paginator may return.

    The first page of a crawl is always fetched, so ``limit`` counts the
    *additional* pages: with a limit of 1 the initial URL plus one more page
    are crawled, and a limit of 0 prevents any pagination.

    Once the limit is reached the wrapped paginator is no longer called;
    only reset(), which starts a new crawl, re-enables it.
    The counter is not synchronized; use one instance per crawl or guard
    it with a lock when sharing it between threads.
    """

    def __init__(self, limit: int, paginator: Paginator):
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self._limit = limit
        self._paginator = paginator
        self._current = 0

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def current(self) -> int:
        return self._current

    @property
    def paginator(self) -> Paginator:
        return self._paginator

    def next_page(
        self,
        current_url: str,
        document: Optional[ParsedDocument] = None,
    ) -> str:
        """Delegate to the wrapped paginator until the limit is reached."""
        # If we've already paginated this number of pages, then we stop.
        if self._current >= self._limit:
            logger.debug(f"Page limit {self._limit} reached at {current_url}")
            return ''

        # Counted even when the wrapped paginator raises
        self._current += 1
        return self._paginator.next_page(current_url, document)

    def reset(self):
        """Reset the counter and the wrapped paginator."""
        self._current = 0
        self._paginator.reset()

    def get_state(self) -> Dict[str, Any]:
        return {
            'type': 'limit',
            'current': self._current,
            'limit': self._limit,
            'inner': self._paginator.get_state(),
        }

    def __repr__(self) -> str:
        return f"LimitingPaginator(limit={self._limit!r}, paginator={self._paginator!r})"
