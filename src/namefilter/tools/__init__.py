"""
Record sources and output helpers for namefilter.

This module contains the directory lister, text stream readers and output
formatters used by the command line.
"""

from .listing import DirectoryLister, list_directory
from .sources import read_line_records, read_json_records
from .formatter import format_text, format_json, get_formatter

__all__ = [
    'DirectoryLister',
    'list_directory',
    'read_line_records',
    'read_json_records',
    'format_text',
    'format_json',
    'get_formatter',
]
