"""
Tests for the pagination registry and factory.

Tests cover:
- create_paginator factory
- Per-domain rules and defaults
- Building bounded paginators from config
- Resolving a paginator from a start URL
"""

import pytest

from crawl_paginators import registry, settings
from crawl_paginators.exceptions import URLParseError
from crawl_paginators.pagination import (
    LimitingPaginator,
    QueryParamPaginator,
    SelectorPaginator,
)
from crawl_paginators.registry import (
    DEFAULT_NEXT_LINK_SELECTOR,
    build_paginator,
    create_paginator,
    get_pagination_config,
    get_paginator_for_url,
    get_rules_for_domain,
    register_site,
    unregister_site,
)


@pytest.fixture
def shop_site():
    """Register a query-parameter site for the duration of a test."""
    register_site('Shop.Example.com', {
        'pagination_type': 'query_param',
        'page_param': 'p',
        'max_pages': 2,
    })
    yield 'shop.example.com'
    unregister_site('shop.example.com')


# ============================================================================
# Factory Tests
# ============================================================================

class TestCreatePaginator:
    """Test the paginator factory."""

    def test_selector(self):
        paginator = create_paginator('selector', selector='a.next', attribute='href')

        assert isinstance(paginator, SelectorPaginator)
        assert paginator.selector == 'a.next'

    def test_query_param(self):
        paginator = create_paginator('query_param', param_name='page')

        assert isinstance(paginator, QueryParamPaginator)
        assert paginator.param_name == 'page'

    def test_limit(self):
        inner = create_paginator('query_param', param_name='page')
        paginator = create_paginator('limit', limit=4, paginator=inner)

        assert isinstance(paginator, LimitingPaginator)
        assert paginator.limit == 4
        assert paginator.paginator is inner

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match='Unknown pagination strategy'):
            create_paginator('infinite_scroll')


# ============================================================================
# Rules Tests
# ============================================================================

class TestPaginationConfig:
    """Test domain rules and defaults."""

    def test_unknown_domain_uses_defaults(self):
        config = get_pagination_config('unknown-site.com')

        assert config == {
            'pagination_type': 'selector',
            'next_link_selector': DEFAULT_NEXT_LINK_SELECTOR,
            'next_link_attribute': 'href',
            'page_param': 'page',
            'max_pages': settings.PAGINATION_MAX_PAGES,
            'strict_numeric': settings.PAGINATION_STRICT_NUMERIC,
        }

    def test_registered_domain(self):
        config = get_pagination_config('news.ycombinator.com')

        assert config['pagination_type'] == 'selector'
        assert config['next_link_selector'] == 'a.morelink'
        assert config['max_pages'] == 5

    def test_domain_lookup_is_case_insensitive(self):
        assert get_rules_for_domain('News.YCombinator.com') == get_rules_for_domain(
            'news.ycombinator.com'
        )

    def test_empty_domain(self):
        assert get_rules_for_domain('') == {}

    def test_default_max_pages_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, 'PAGINATION_MAX_PAGES', 3)

        assert get_pagination_config('unknown-site.com')['max_pages'] == 3

    def test_register_and_unregister(self, shop_site):
        assert get_rules_for_domain(shop_site)['page_param'] == 'p'

        unregister_site(shop_site)

        assert get_rules_for_domain(shop_site) == {}
        assert shop_site not in registry.PAGINATION_RULES

    def test_unregister_missing_site(self):
        unregister_site('never-registered.example.com')


# ============================================================================
# Builder Tests
# ============================================================================

class TestBuildPaginator:
    """Test building bounded paginators from config."""

    def test_selector_config(self):
        paginator = build_paginator({
            'pagination_type': 'selector',
            'next_link_selector': 'a.older',
            'next_link_attribute': 'data-href',
            'max_pages': 7,
        })

        assert isinstance(paginator, LimitingPaginator)
        assert paginator.limit == 7
        assert isinstance(paginator.paginator, SelectorPaginator)
        assert paginator.paginator.selector == 'a.older'
        assert paginator.paginator.attribute == 'data-href'

    def test_query_param_config(self):
        paginator = build_paginator({
            'pagination_type': 'query_param',
            'page_param': 'pg',
            'max_pages': 2,
            'strict_numeric': True,
        })

        assert isinstance(paginator.paginator, QueryParamPaginator)
        assert paginator.paginator.param_name == 'pg'
        assert paginator.paginator.strict is True
        assert paginator.next_page('http://x/?pg=1') == 'http://x/?pg=2'
        assert paginator.next_page('http://x/?pg=2') == 'http://x/?pg=3'
        assert paginator.next_page('http://x/?pg=3') == ''

    def test_none_never_paginates(self):
        paginator = build_paginator({'pagination_type': 'none', 'max_pages': 10})

        assert paginator.limit == 0
        assert paginator.next_page('http://x/?page=1') == ''

    def test_missing_max_pages_uses_settings(self, monkeypatch):
        monkeypatch.setattr(settings, 'PAGINATION_MAX_PAGES', 4)

        paginator = build_paginator({'pagination_type': 'query_param', 'max_pages': None})

        assert paginator.limit == 4

    def test_invalid_selector_in_config(self):
        with pytest.raises(ValueError, match='Invalid selector'):
            build_paginator({'pagination_type': 'selector', 'next_link_selector': 'a['})

    def test_unknown_pagination_type(self):
        with pytest.raises(ValueError, match='Unknown pagination type'):
            build_paginator({'pagination_type': 'path'})


class TestGetPaginatorForUrl:
    """Test resolving a paginator from a start URL."""

    def test_registered_host(self, make_document):
        paginator = get_paginator_for_url('https://News.YCombinator.com:443/news')
        document = make_document('<a class="morelink" href="?p=2" rel="next">More</a>')

        assert paginator.limit == 5
        assert paginator.paginator.selector == 'a.morelink'
        assert paginator.next_page('https://news.ycombinator.com/news', document) == (
            'https://news.ycombinator.com/news?p=2'
        )

    def test_registered_query_param_site(self, shop_site):
        paginator = get_paginator_for_url('https://shop.example.com/catalog?p=1')

        assert isinstance(paginator.paginator, QueryParamPaginator)
        assert paginator.next_page('https://shop.example.com/catalog?p=1') == (
            'https://shop.example.com/catalog?p=2'
        )

    def test_unknown_host_uses_default_selector(self, listing_document):
        paginator = get_paginator_for_url('https://example.com/news/')

        assert paginator.paginator.selector == DEFAULT_NEXT_LINK_SELECTOR
        assert paginator.next_page('https://example.com/news/', listing_document) == (
            'https://example.com/news/?page=2'
        )

    def test_overrides_take_precedence(self):
        paginator = get_paginator_for_url(
            'https://news.ycombinator.com/news',
            overrides={'max_pages': 1},
        )

        assert paginator.limit == 1

    def test_malformed_url(self):
        with pytest.raises(URLParseError):
            get_paginator_for_url('http://[::1/news')
