"""
Exception types for namefilter.
"""


class NameFilterError(Exception):
    """Base class for all namefilter errors."""
    pass


class ConfigurationError(NameFilterError):
    """Raised when search terms or settings cannot be turned into a usable configuration."""
    pass
