"""
Pipeline adapter for namefilter.

This module connects a record source to the record matcher: it parses the
search terms once, then passes each incoming record through and yields only
the ones that match, in input order.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Union

from pydantic import BaseModel

from ..models.filter_config import FilterConfig
from ..models.records import DEFAULT_NAME_ATTRIBUTE
from .matcher import record_matches
from .parser import parse_search_terms


logger = logging.getLogger(__name__)


def _as_record_stream(input_objects: Any) -> Iterable[Any]:
    """
    Normalize the input into an iterable of records.

    None means no records. Mappings, models, strings and other non-iterable
    values are a single record.
    """
    if input_objects is None:
        return ()
    if isinstance(input_objects, (Mapping, BaseModel, str, bytes)):
        return (input_objects,)
    try:
        return iter(input_objects)
    except TypeError:
        return (input_objects,)


class KeywordFilter:
    """
    Applies one filter configuration to a stream of records.

    A KeywordFilter is built per filtering operation; its configuration is
    immutable and its counters describe only the records it has seen.
    """

    def __init__(self, config: FilterConfig, name_attribute: str = DEFAULT_NAME_ATTRIBUTE):
        """
        Initialize the filter.

        Args:
            config: Parsed filter configuration
            name_attribute: Attribute of each record holding its name
        """
        self.config = config
        self.name_attribute = name_attribute
        self._stats = self._empty_stats()

    @classmethod
    def from_terms(cls, search_terms: Union[str, Iterable[Optional[str]]],
                   name_attribute: str = DEFAULT_NAME_ATTRIBUTE) -> 'KeywordFilter':
        """
        Build a filter directly from search terms.

        Raises:
            ConfigurationError: If the terms contain no keywords
        """
        return cls(parse_search_terms(search_terms), name_attribute=name_attribute)

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'records_seen': 0,
            'records_matched': 0,
            'records_dropped': 0,
        }

    def matches(self, record: Any) -> bool:
        """Check a single record and update the counters."""
        self._stats['records_seen'] += 1

        if record_matches(record, self.config, self.name_attribute):
            self._stats['records_matched'] += 1
            return True

        self._stats['records_dropped'] += 1
        return False

    def filter(self, input_objects: Any) -> Iterator[Any]:
        """
        Yield the matching records of a stream, preserving order.

        Args:
            input_objects: Iterable of records, a single record, or None

        Yields:
            Records whose name satisfies the configuration
        """
        for record in _as_record_stream(input_objects):
            if self.matches(record):
                yield record

        logger.info(
            f"Filtered {self._stats['records_seen']} record(s): "
            f"{self._stats['records_matched']} matched, "
            f"{self._stats['records_dropped']} dropped"
        )

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the records processed so far.

        Returns:
            Dictionary containing the record counters
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()


def filter_by_name(search_terms: Union[str, Iterable[Optional[str]]],
                   input_objects: Any,
                   name_attribute: str = DEFAULT_NAME_ATTRIBUTE) -> Iterator[Any]:
    """
    Filter records by keywords found in their name.

    The search terms are parsed immediately, so a configuration error is
    raised before any record is consumed. The returned iterator is lazy.

    Args:
        search_terms: Keywords, optionally with an "and"/"or" operator term
        input_objects: Iterable of records, a single record, or None
        name_attribute: Attribute of each record holding its name

    Returns:
        Iterator over the matching records in input order

    Raises:
        ConfigurationError: If the terms contain no keywords

    Example:
        >>> names = [{"Name": "apple pie"}, {"Name": "cherry pie"}]
        >>> list(filter_by_name(["apple", "and", "pie"], names))
        [{'Name': 'apple pie'}]
    """
    keyword_filter = KeywordFilter.from_terms(search_terms, name_attribute=name_attribute)
    return keyword_filter.filter(input_objects)


fob = filter_by_name
