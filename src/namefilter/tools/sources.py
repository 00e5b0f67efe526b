"""
Text record sources for namefilter.

Generators that turn a text stream into records: one record per line, or one
JSON value per line.
"""

import json
import logging
from typing import Any, Dict, Iterator, TextIO

from ..models.records import DEFAULT_NAME_ATTRIBUTE


logger = logging.getLogger(__name__)


def read_line_records(stream: TextIO, name_attribute: str = DEFAULT_NAME_ATTRIBUTE) -> Iterator[Dict[str, str]]:
    """Yield one record per line, with the line (minus its newline) as the name."""
    for line in stream:
        yield {name_attribute: line.rstrip('\r\n')}


def read_json_records(stream: TextIO) -> Iterator[Any]:
    """
    Yield one decoded JSON value per non-blank line.

    Lines that are not valid JSON are logged and skipped.
    """
    for line_number, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning(f"Skipping line {line_number}: invalid JSON ({e})")
