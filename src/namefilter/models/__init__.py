"""
Data models for namefilter.

This module contains the parsed filter configuration, the record helpers and
the settings loaded from YAML.
"""

from .filter_config import FilterConfig, LogicMode
from .records import FileEntry, get_name_value, DEFAULT_NAME_ATTRIBUTE
from .settings import FilterSettings, ListingConfig, OutputConfig, OutputFormat

__all__ = [
    'FilterConfig',
    'LogicMode',
    'FileEntry',
    'get_name_value',
    'DEFAULT_NAME_ATTRIBUTE',
    'FilterSettings',
    'ListingConfig',
    'OutputConfig',
    'OutputFormat',
]
