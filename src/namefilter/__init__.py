"""
namefilter - keyword filtering for object pipelines

Narrows a sequence of records down to the ones whose name contains the
given keywords, combined with AND/OR logic.
"""

__version__ = "0.1.0"
__author__ = "namefilter Team"

from .exceptions import ConfigurationError, NameFilterError
from .models.filter_config import FilterConfig, LogicMode
from .models.records import get_name_value
from .filtering.parser import parse_search_terms
from .filtering.matcher import record_matches
from .filtering.keyword_filter import KeywordFilter, filter_by_name, fob

__all__ = [
    'ConfigurationError',
    'NameFilterError',
    'FilterConfig',
    'LogicMode',
    'get_name_value',
    'parse_search_terms',
    'record_matches',
    'KeywordFilter',
    'filter_by_name',
    'fob',
]
