"""
Pagination package for crawlers.

Provides different pagination strategies.
"""

from .strategies import (
    LimitingPaginator,
    QueryParamPaginator,
    SelectorPaginator,
)

__all__ = [
    'SelectorPaginator',
    'QueryParamPaginator',
    'LimitingPaginator',
]
