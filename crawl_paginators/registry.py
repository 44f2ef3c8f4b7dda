"""
Registry of site-specific pagination rules.

Each entry can define:
- pagination_type: 'selector' (follow link), 'query_param' (URL parameter), 'none'
- next_link_selector: CSS selector for the "next page" element
- next_link_attribute: attribute holding the link (default: 'href')
- page_param: query parameter name for pagination (default: 'page')
- max_pages: maximum additional pages to paginate per crawl
- strict_numeric: raise instead of stopping on a non-numeric page parameter

Add a new entry keyed by domain to tune a site without hard-coding in the crawler.
"""

import logging
from typing import Any, Dict, Optional

from . import settings
from .interfaces import Paginator
from .pagination import (
    LimitingPaginator,
    QueryParamPaginator,
    SelectorPaginator,
)
from .utils import parse_url

logger = logging.getLogger(__name__)

DEFAULT_NEXT_LINK_SELECTOR = 'a[rel="next"], link[rel="next"], a.next'

PAGINATION_RULES: Dict[str, Dict[str, Any]] = {
    # Example: Hacker News - "More" link at the bottom of each listing
    "news.ycombinator.com": {
        "pagination_type": "selector",
        "next_link_selector": "a.morelink",
        "next_link_attribute": "href",
        "max_pages": 5,
    },
    # Example: Site with ?page=N listings
    # "shop.example.com": {
    #     "pagination_type": "query_param",
    #     "page_param": "p",
    #     "max_pages": 20,
    # },
    # Example: Site that should never paginate
    # "single.example.com": {
    #     "pagination_type": "none",
    # },
}


def create_paginator(strategy: str, **kwargs) -> Paginator:
    """
    Factory function to create paginators.

    Args:
        strategy: One of 'selector', 'query_param', 'limit'
        **kwargs: Constructor arguments for the paginator

    Returns:
        Paginator instance
    """
    strategies = {
        'selector': SelectorPaginator,
        'query_param': QueryParamPaginator,
        'limit': LimitingPaginator,
    }

    if strategy not in strategies:
        raise ValueError(f"Unknown pagination strategy: {strategy}")

    return strategies[strategy](**kwargs)


def get_rules_for_domain(domain: str) -> dict:
    """Return pagination rules for the given domain, if present."""
    if not domain:
        return {}
    return PAGINATION_RULES.get(domain.lower(), {})


def get_pagination_config(domain: str) -> dict:
    """
    Get pagination configuration for a domain with sensible defaults.

    Returns:
        dict with pagination settings:
        - pagination_type: 'selector', 'query_param', or 'none'
        - next_link_selector: CSS selector (for 'selector' type)
        - next_link_attribute: attribute to read (for 'selector' type)
        - page_param: query parameter name (for 'query_param' type)
        - max_pages: maximum additional pages
        - strict_numeric: strictness of the page parameter
    """
    rules = get_rules_for_domain(domain)

    return {
        'pagination_type': rules.get('pagination_type', 'selector'),
        'next_link_selector': rules.get('next_link_selector', DEFAULT_NEXT_LINK_SELECTOR),
        'next_link_attribute': rules.get('next_link_attribute', 'href'),
        'page_param': rules.get('page_param', 'page'),
        'max_pages': rules.get('max_pages', settings.PAGINATION_MAX_PAGES),
        'strict_numeric': rules.get('strict_numeric', settings.PAGINATION_STRICT_NUMERIC),
    }


def build_paginator(config: dict) -> LimitingPaginator:
    """
    Build a bounded paginator from a pagination config.

    The leaf strategy is always wrapped in a LimitingPaginator, so a
    query-parameter crawl cannot run forever.
    """
    pagination_type = config.get('pagination_type', 'selector')
    max_pages = config.get('max_pages')
    if max_pages is None:
        max_pages = settings.PAGINATION_MAX_PAGES

    if pagination_type == 'selector':
        inner = create_paginator(
            'selector',
            selector=config.get('next_link_selector', DEFAULT_NEXT_LINK_SELECTOR),
            attribute=config.get('next_link_attribute', 'href'),
        )
    elif pagination_type == 'query_param':
        inner = create_paginator(
            'query_param',
            param_name=config.get('page_param', 'page'),
            strict=config.get('strict_numeric', settings.PAGINATION_STRICT_NUMERIC),
        )
    elif pagination_type == 'none':
        # Never consulted with a limit of 0
        inner = create_paginator('query_param', param_name=config.get('page_param', 'page'))
        max_pages = 0
    else:
        raise ValueError(f"Unknown pagination type: {pagination_type}")

    return create_paginator('limit', limit=max_pages, paginator=inner)


def get_paginator_for_url(url: str, overrides: Optional[dict] = None) -> LimitingPaginator:
    """
    Create the paginator registered for a URL's domain.

    Args:
        url: Start URL of the crawl
        overrides: Config values that take precedence over the registry

    Returns:
        LimitingPaginator wrapping the configured strategy
    """
    domain = parse_url(url).hostname or ''
    config = get_pagination_config(domain)
    if overrides:
        config.update(overrides)

    logger.info(
        f"Using {config['pagination_type']} pagination for {domain or url} "
        f"(max_pages={config['max_pages']})"
    )
    return build_paginator(config)


def register_site(domain: str, rules: dict):
    """
    Dynamically register or update rules for a domain.

    Args:
        domain: Domain name (e.g., 'example.com')
        rules: Dict of rules to apply
    """
    PAGINATION_RULES[domain.lower()] = rules


def unregister_site(domain: str):
    """Remove rules for a domain."""
    PAGINATION_RULES.pop(domain.lower(), None)
