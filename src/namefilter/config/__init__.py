"""
Settings management package for namefilter.

This package provides settings file parsing, validation, and template
generation.
"""

from ..exceptions import ConfigurationError
from .parser import (
    ConfigParser,
    ConfigParseResult,
    load_config,
    validate_config_file,
    create_config_template
)

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'load_config',
    'validate_config_file',
    'create_config_template'
]
