"""
URL helpers shared by the pagination strategies.

The standard library's URL functions are lenient and almost never fail;
these wrappers add the validation needed to tell a malformed URL apart
from one that simply has nothing left to paginate.
"""

import re
from typing import List, Tuple
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

import rfc3986
from rfc3986.exceptions import ResolutionError

from .exceptions import QueryParseError, URLParseError

# Largest value a page counter may take (unsigned 64-bit)
MAX_PAGE_NUMBER = 2 ** 64 - 1

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]')
_INVALID_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')
_DECIMAL = re.compile(r'[0-9]+')

# Undecodable bytes survive a decode/encode round trip as lone surrogates
_QUERY_ENCODING = 'utf-8'
_QUERY_ERRORS = 'surrogateescape'


# =============================================================================
# URL Parsing
# =============================================================================

def parse_url(url: str) -> SplitResult:
    """
    Split a URL or URI reference into its components.

    Raises:
        URLParseError: control characters, an invalid port, unbalanced IPv6
            brackets, or an invalid percent-escape outside the query
    """
    if _CONTROL_CHARS.search(url):
        raise URLParseError(url, 'invalid control character in URL')

    try:
        parts = urlsplit(url)
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise URLParseError(url, str(e)) from e

    # The query is validated separately, and only by strategies that read it
    for component in (parts.netloc, parts.path, parts.fragment):
        if _INVALID_ESCAPE.search(component):
            raise URLParseError(url, 'invalid URL escape')

    return parts


def build_url(parts: SplitResult, query: str) -> str:
    """Reassemble a split URL with a replacement query string."""
    return urlunsplit(parts._replace(query=query))


def resolve_url(base: str, reference: str) -> str:
    """
    Resolve a URI reference against an absolute base URL (RFC 3986 section 5).

    Works for every scheme, not only those urljoin knows to be relative.

    Raises:
        URLParseError: the base URL has no scheme
    """
    # The base fragment never takes part in resolution
    base_uri = rfc3986.uri_reference(base).copy_with(fragment=None)
    try:
        return rfc3986.uri_reference(reference).resolve_with(base_uri).unsplit()
    except ResolutionError as e:
        raise URLParseError(base, 'base URL is not absolute') from e


# =============================================================================
# Query Strings
# =============================================================================

def parse_query(query: str) -> List[Tuple[str, str]]:
    """
    Decode a query string into ordered (name, value) pairs.

    Blank values are kept so that re-encoding does not drop parameters, and
    bytes that are not valid UTF-8 are carried through unchanged.

    Raises:
        QueryParseError: the query contains an invalid percent-escape or a
            semicolon separator
    """
    if _INVALID_ESCAPE.search(query):
        raise QueryParseError(query, 'invalid URL escape in query')
    if ';' in query:
        raise QueryParseError(query, 'invalid semicolon separator in query')
    return parse_qsl(
        query,
        keep_blank_values=True,
        encoding=_QUERY_ENCODING,
        errors=_QUERY_ERRORS,
    )


def encode_query(pairs: List[Tuple[str, str]]) -> str:
    """Encode (name, value) pairs back into a query string."""
    return urlencode(pairs, encoding=_QUERY_ENCODING, errors=_QUERY_ERRORS)


def parse_page_number(value: str) -> int | None:
    """
    Parse a page counter as an unsigned base-10 integer.

    Only ASCII digits are accepted: no sign, whitespace or underscores.
    Returns None when the value is not a number or does not fit in 64 bits.
    """
    if not _DECIMAL.fullmatch(value):
        return None
    number = int(value)
    if number > MAX_PAGE_NUMBER:
        return None
    return number
