"""
Pagination strategies for web crawlers.

Module Structure:
- interfaces: Paginator abstract base class
- pagination: Selector, query-parameter and limiting strategies
- registry: Per-domain pagination rules and the paginator factory
- exceptions: Errors raised for malformed URLs and query strings
"""

from .exceptions import PaginationError, QueryParseError, URLParseError
from .interfaces import Paginator, ParsedDocument
from .pagination import (
    LimitingPaginator,
    QueryParamPaginator,
    SelectorPaginator,
)
from .registry import (
    build_paginator,
    create_paginator,
    get_pagination_config,
    get_paginator_for_url,
    get_rules_for_domain,
    register_site,
    unregister_site,
)

__version__ = '0.1.0'

__all__ = [
    # Interfaces (ABCs)
    'Paginator',
    'ParsedDocument',

    # Paginator implementations
    'SelectorPaginator',
    'QueryParamPaginator',
    'LimitingPaginator',

    # Configuration
    'create_paginator',
    'build_paginator',
    'get_pagination_config',
    'get_paginator_for_url',
    'get_rules_for_domain',
    'register_site',
    'unregister_site',

    # Errors
    'PaginationError',
    'URLParseError',
    'QueryParseError',
]
