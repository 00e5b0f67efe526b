"""
Record data models and name extraction for namefilter.

Records are owned by whatever produced them. The filter only needs read access
to one name-like attribute, looked up on mappings by key and on any other
object by attribute.
"""

from typing import Any, Dict, Mapping, Optional, Tuple
from datetime import datetime
from pathlib import Path
from pydantic import BaseModel, Field, field_validator


DEFAULT_NAME_ATTRIBUTE = "Name"


def _attribute_candidates(attribute: str) -> Tuple[str, ...]:
    """Return the spellings of an attribute name to try, most specific first."""
    candidates = [attribute, attribute.lower(), attribute.capitalize()]
    seen = []
    for candidate in candidates:
        if candidate not in seen:
            seen.append(candidate)
    return tuple(seen)


def get_name_value(record: Any, attribute: str = DEFAULT_NAME_ATTRIBUTE) -> Tuple[Optional[Any], bool]:
    """
    Extract the name attribute from a record.

    Mappings are looked up by key, first exactly and then case-insensitively.
    Other objects are looked up by attribute, trying the given spelling and
    its lower-case and capitalized forms. Methods are skipped.

    Args:
        record: Record to inspect (may be None)
        attribute: Name of the attribute holding the record's name

    Returns:
        Tuple of (value, present). ``present`` is False when the record is
        None or has no such attribute; ``value`` may still be None when the
        attribute exists but holds no value.
    """
    if record is None:
        return None, False

    if isinstance(record, Mapping):
        if attribute in record:
            return record[attribute], True

        lowered = attribute.lower()
        for key in record:
            if isinstance(key, str) and key.lower() == lowered:
                return record[key], True

        return None, False

    for candidate in _attribute_candidates(attribute):
        try:
            value = getattr(record, candidate)
        except AttributeError:
            continue
        # Methods are behaviour, not a name
        if callable(value):
            continue
        return value, True

    return None, False


class FileEntry(BaseModel):
    """
    A single entry of a directory listing.

    Attributes:
        name: Base name of the file or directory
        path: Absolute path of the entry
        is_dir: Whether the entry is a directory
        size: Size in bytes (0 for directories)
        modified_time: Last modification timestamp
        extension: Lower-cased file extension (e.g. '.py'), None for directories
    """

    name: str = Field(..., description="Base name of the file or directory")
    path: str = Field(..., description="Absolute path of the entry")
    is_dir: bool = Field(False, description="Whether the entry is a directory")
    size: int = Field(0, ge=0, description="Size in bytes")
    modified_time: Optional[datetime] = Field(None, description="Last modification timestamp")
    extension: Optional[str] = Field(None, description="File extension")

    @field_validator('extension')
    @classmethod
    def validate_extension(cls, v: Optional[str]) -> Optional[str]:
        """Normalize extension to include leading dot."""
        if v is None or v == "":
            return None
        if not v.startswith('.'):
            return '.' + v.lower()
        return v.lower()

    @classmethod
    def from_path(cls, path: Path) -> 'FileEntry':
        """Build an entry from a filesystem path, reading its stat data."""
        stat_result = path.stat()
        is_dir = path.is_dir()
        return cls(
            name=path.name,
            path=str(path.resolve()),
            is_dir=is_dir,
            size=0 if is_dir else stat_result.st_size,
            modified_time=datetime.fromtimestamp(stat_result.st_mtime),
            extension=None if is_dir else (path.suffix or None),
        )

    def get_size_human_readable(self) -> str:
        """Get size in human-readable format."""
        size = float(self.size)
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if size < 1024.0:
                return f"{size:.1f} {unit}"
            size /= 1024.0
        return f"{size:.1f} PB"

    def to_dict(self) -> Dict[str, Any]:
        """Convert the entry to dictionary representation."""
        data = self.model_dump()
        data['size_human'] = self.get_size_human_readable()
        if data['modified_time']:
            data['modified_time'] = self.modified_time.isoformat()
        return data

    def __str__(self) -> str:
        return self.path
