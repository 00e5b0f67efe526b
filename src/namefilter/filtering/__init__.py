"""
Keyword filtering for namefilter.

This package turns search terms into a filter configuration and applies it to
streams of records.
"""

from .parser import parse_search_terms, OPERATOR_TOKENS
from .matcher import record_matches, name_matches
from .keyword_filter import KeywordFilter, filter_by_name, fob

__all__ = [
    'parse_search_terms',
    'OPERATOR_TOKENS',
    'record_matches',
    'name_matches',
    'KeywordFilter',
    'filter_by_name',
    'fob',
]
