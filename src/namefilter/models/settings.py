"""
Settings data models for namefilter.

This module defines the settings that can be supplied from a YAML file:
which attribute holds a record's name, how directories are listed when the
command line reads files, and how results are printed.
"""

from typing import Dict, List, Optional, Any
from pathlib import Path
from enum import Enum
import re
import fnmatch
from pydantic import BaseModel, Field, PrivateAttr, field_validator

from .records import DEFAULT_NAME_ATTRIBUTE


class OutputFormat(Enum):
    """Supported output formats."""
    TEXT = "text"
    JSON = "json"


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class ListingConfig(BaseModel):
    """
    Configuration for directory listings.

    Attributes:
        roots: Directories to list when no path is given on the command line
        recurse: Whether to descend into subdirectories
        include_directories: Whether directories are emitted as records
        ignore: Ignore patterns (gitignore-style, '!' negates)
        max_entries: Maximum number of entries to emit per listing
    """

    roots: List[str] = Field(default_factory=lambda: ["."], min_length=1, description="Directories to list")
    recurse: bool = Field(False, description="Whether to descend into subdirectories")
    include_directories: bool = Field(True, description="Whether directories are emitted as records")
    ignore: List[str] = Field(
        default_factory=lambda: [
            "**/.git/**",
            "**/__pycache__/**",
            "**/.pytest_cache/**",
        ],
        description="List of ignore patterns (gitignore-style)"
    )
    max_entries: int = Field(200000, gt=0, description="Maximum number of entries to emit")

    _compiled_ignore_patterns: List[Dict[str, Any]] = PrivateAttr(default_factory=list)

    @field_validator('roots')
    @classmethod
    def validate_roots(cls, v: List[str]) -> List[str]:
        """Drop blank roots and expand user paths."""
        normalized_roots = []
        for root in v:
            if not root or not root.strip():
                continue
            normalized_roots.append(str(Path(root.strip()).expanduser()))

        if not normalized_roots:
            raise ValueError("No valid root directories provided")

        return normalized_roots

    def model_post_init(self, __context) -> None:
        """Normalize and compile ignore patterns."""
        self._normalize_ignore_patterns()
        self._compile_ignore_patterns()

    def _normalize_ignore_patterns(self) -> None:
        """Normalize ignore patterns so unanchored patterns match at any depth."""
        normalized_patterns = []
        for pattern in self.ignore:
            if not pattern or not pattern.strip():
                continue

            pattern = pattern.strip()

            # Skip comments
            if pattern.startswith('#'):
                continue

            is_negation = pattern.startswith('!')
            body = pattern[1:] if is_negation else pattern
            if not body:
                continue

            if not (body.startswith('**/') or body.startswith('/')):
                body = '**/' + body

            normalized_patterns.append(('!' if is_negation else '') + body)

        self.ignore = normalized_patterns

    def _compile_ignore_patterns(self) -> None:
        """Compile ignore patterns for efficient matching."""
        compiled = []
        for pattern in self.ignore:
            is_negation = pattern.startswith('!')
            try:
                regex_pattern = self._gitignore_to_regex(pattern[1:] if is_negation else pattern)
                compiled.append({
                    'regex': re.compile(regex_pattern),
                    'is_negation': is_negation,
                    'original': pattern
                })
            except re.error as e:
                raise ValueError(f"Invalid ignore pattern '{pattern}': {e}")
        self._compiled_ignore_patterns = compiled

    @staticmethod
    def _gitignore_to_regex(pattern: str) -> str:
        """
        Convert a normalized gitignore-style pattern to a regex.

        Supports '*', '?', character classes, '**' directory wildcards,
        trailing '/' for directory-only patterns and leading '/' for rooted
        patterns.

        Args:
            pattern: Gitignore-style pattern without a leading '!'

        Returns:
            Regex pattern string
        """
        is_directory_only = pattern.endswith('/')
        if is_directory_only:
            pattern = pattern[:-1]

        is_rooted = pattern.startswith('/')
        if is_rooted:
            pattern = pattern[1:]

        regex_parts = []
        parts = pattern.split('**')
        for i, part in enumerate(parts):
            if i > 0:
                if part.startswith('/'):
                    # **/ - zero or more directories
                    regex_parts.append(r'(?:[^/]+/)*')
                    part = part[1:]
                else:
                    regex_parts.append(r'.*')

            if part:
                part_regex = fnmatch.translate(part)
                # fnmatch wraps its output as (?s:...)\Z
                part_regex = part_regex[4:-3] if part_regex.startswith('(?s:') else part_regex
                # A single '*' never crosses a directory boundary
                part_regex = part_regex.replace('.*', '[^/]*')
                regex_parts.append(part_regex)

        body = ''.join(regex_parts)
        prefix = '^' if is_rooted else r'(^|/)'
        if is_directory_only:
            return f'{prefix}{body}/'
        return f'{prefix}{body}(/.*)?$'

    def should_ignore(self, path: str, is_dir: bool = False) -> bool:
        """
        Check if a path should be ignored.

        Patterns are applied in order; a later negation pattern un-ignores a
        path that an earlier pattern ignored.

        Args:
            path: File or directory path to check
            is_dir: Whether the path is a directory

        Returns:
            True if the path should be ignored
        """
        normalized_path = Path(path).as_posix().lstrip('/')
        if is_dir:
            normalized_path += '/'

        should_ignore_path = False
        for pattern_info in self._compiled_ignore_patterns:
            if pattern_info['regex'].search(normalized_path):
                should_ignore_path = not pattern_info['is_negation']

        return should_ignore_path

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class OutputConfig(BaseModel):
    """
    Configuration for printing filtered records.

    Attributes:
        format: Output format for each matching record
    """

    format: OutputFormat = Field(OutputFormat.TEXT, description="Output format")

    @field_validator('format', mode='before')
    @classmethod
    def validate_format(cls, v) -> OutputFormat:
        """Validate and convert format to enum."""
        if isinstance(v, str):
            try:
                return OutputFormat(v.strip().lower())
            except ValueError:
                raise ValueError(f"Invalid output format: {v}")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {'format': self.format.value}


class FilterSettings(BaseModel):
    """
    Top-level settings for namefilter.

    Attributes:
        name_attribute: Attribute of each record that holds its name
        verbose: Whether per-record trace output is enabled
        log_level: Log level used when verbose is off
        listing: Directory listing configuration
        output: Output configuration
    """

    name_attribute: str = Field(DEFAULT_NAME_ATTRIBUTE, description="Attribute holding the record name")
    verbose: bool = Field(False, description="Enable per-record trace output")
    log_level: str = Field("WARNING", description="Log level when verbose is off")
    listing: ListingConfig = Field(default_factory=ListingConfig, description="Directory listing configuration")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output configuration")

    @field_validator('name_attribute')
    @classmethod
    def validate_name_attribute(cls, v: str) -> str:
        """Reject blank attribute names."""
        if not v or not v.strip():
            raise ValueError("name_attribute cannot be empty")
        return v.strip()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level '{v}'. Must be one of: {VALID_LOG_LEVELS}")
        return level

    def effective_log_level(self) -> str:
        """Log level after applying the verbose switch."""
        return "DEBUG" if self.verbose else self.log_level

    def validate_configuration(self) -> List[str]:
        """
        Check for settings that are valid but probably unintended.

        Returns:
            List of warning messages
        """
        warnings = []

        if self.listing.recurse and not self.listing.ignore:
            warnings.append("Recursive listing without ignore patterns may emit a very large number of records")

        if self.listing.max_entries > 1000000:
            warnings.append("Very high max_entries limit may cause memory issues")

        if not self.listing.include_directories and not self.listing.recurse:
            warnings.append("Directories are excluded and recursion is off - only top-level files will be listed")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary representation."""
        data = self.model_dump()
        data['listing'] = self.listing.to_dict()
        data['output'] = self.output.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'FilterSettings':
        """Create settings from dictionary representation."""
        return cls.model_validate(data or {})

    def __str__(self) -> str:
        """String representation of the settings."""
        parts = [f"Name attribute: {self.name_attribute}"]
        parts.append(f"Roots: {len(self.listing.roots)} directories")
        parts.append(f"Recurse: {self.listing.recurse}")
        parts.append(f"Output: {self.output.format.value}")
        return " | ".join(parts)
