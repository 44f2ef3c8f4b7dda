"""Shared fixtures for pagination tests."""

import pytest
from unittest.mock import MagicMock
from bs4 import BeautifulSoup

from crawl_paginators.interfaces import Paginator


LISTING_HTML = """
<html>
<head>
    <link rel="next" href="/news/?page=2">
</head>
<body>
    <ul class="articles">
        <li><a href="/news/first-story.html">First story</a></li>
        <li><a href="/news/second-story.html">Second story</a></li>
    </ul>
    <div class="pagination">
        <a href="/news/?page=1">1</a>
        <a href="/news/?page=2" class="next">Next</a>
        <a class="disabled">Last</a>
    </div>
</body>
</html>
"""


@pytest.fixture
def make_document():
    """Parse an HTML snippet the way the crawler does."""
    def _make(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, 'html.parser')
    return _make


@pytest.fixture
def listing_document(make_document):
    """A news listing page with a pagination block."""
    return make_document(LISTING_HTML)


@pytest.fixture
def inner_paginator():
    """A Paginator double that records how often it is consulted."""
    paginator = MagicMock(spec=Paginator)
    paginator.next_page.return_value = 'https://example.com/news/?page=2'
    paginator.get_state.return_value = {'type': 'mock'}
    return paginator
