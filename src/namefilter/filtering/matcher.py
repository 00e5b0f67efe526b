"""
Record matching for namefilter.

Decides for a single record whether its name satisfies a filter configuration.
Records without a usable name never match, and problems reading a name are
treated as a non-match rather than an error.
"""

import logging
from typing import Any

from ..models.filter_config import FilterConfig, LogicMode
from ..models.records import DEFAULT_NAME_ATTRIBUTE, get_name_value


logger = logging.getLogger(__name__)


def name_matches(text: str, config: FilterConfig) -> bool:
    """
    Test a name against the configured keywords.

    Matching is case-insensitive substring containment; keywords are never
    interpreted as patterns.

    Args:
        text: Name to test
        config: Parsed filter configuration

    Returns:
        True if the name satisfies the configured logic
    """
    keywords = config.lowered_keywords
    if not keywords:
        return False

    haystack = text.lower()
    if config.logic is LogicMode.AND:
        return all(keyword in haystack for keyword in keywords)
    return any(keyword in haystack for keyword in keywords)


def record_matches(record: Any, config: FilterConfig, name_attribute: str = DEFAULT_NAME_ATTRIBUTE) -> bool:
    """
    Decide whether a record should be emitted.

    Args:
        record: Record to test (may be None)
        config: Parsed filter configuration
        name_attribute: Attribute holding the record's name

    Returns:
        True if the record has a usable name that satisfies the configuration
    """
    if record is None:
        logger.debug("Skipping null record")
        return False

    try:
        value, present = get_name_value(record, name_attribute)
        if not present:
            logger.debug(f"Skipping {type(record).__name__} record without a '{name_attribute}' attribute")
            return False

        if value is None:
            logger.debug(f"Skipping record with null '{name_attribute}'")
            return False

        text = str(value)
    except Exception as e:
        logger.debug(f"Skipping record whose '{name_attribute}' could not be read: {e}")
        return False

    if not text.strip():
        logger.debug(f"Skipping record with blank '{name_attribute}'")
        return False

    matched = name_matches(text, config)
    logger.debug(f"{'Match' if matched else 'No match'}: '{text}' against {config}")
    return matched
