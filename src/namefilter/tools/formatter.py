"""Output formatters for filtered records: text and JSON (NDJSON)."""

import json
from typing import Any, Callable, Mapping

from ..models.records import DEFAULT_NAME_ATTRIBUTE, FileEntry, get_name_value
from ..models.settings import OutputFormat


def _record_to_dict(record: Any, name_attribute: str) -> Any:
    if isinstance(record, FileEntry):
        return record.to_dict()
    if isinstance(record, Mapping):
        return dict(record)
    value, _ = get_name_value(record, name_attribute)
    return {name_attribute: None if value is None else str(value)}


def format_text(record: Any, name_attribute: str = DEFAULT_NAME_ATTRIBUTE) -> str:
    """Return the record's path for file entries, otherwise its name."""
    if isinstance(record, FileEntry):
        return record.path
    value, present = get_name_value(record, name_attribute)
    return str(value) if present else str(record)


def format_json(record: Any, name_attribute: str = DEFAULT_NAME_ATTRIBUTE) -> str:
    """Return the record as one line of JSON."""
    return json.dumps(_record_to_dict(record, name_attribute), default=str)


def get_formatter(output_format: OutputFormat = OutputFormat.TEXT,
                  name_attribute: str = DEFAULT_NAME_ATTRIBUTE) -> Callable[[Any], str]:
    """Factory that returns a one-argument formatter for the given format."""
    if output_format is OutputFormat.JSON:
        return lambda record: format_json(record, name_attribute)
    return lambda record: format_text(record, name_attribute)
