"""
Filter configuration data models for namefilter.

This module defines the parsed form of a list of search terms: the keywords
to look for and the logic used to combine them.
"""

from typing import Dict, Any, Tuple
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator


class LogicMode(Enum):
    """How multiple keywords are combined."""
    AND = "and"
    OR = "or"


class FilterConfig(BaseModel):
    """
    Parsed search terms for a single filtering operation.

    Instances are immutable and are built once per filter call, then
    handed to the record matcher for every record of that call.

    Attributes:
        keywords: Ordered keywords, trimmed, duplicates allowed
        logic: How the keywords are combined
        logic_explicit: Whether an operator token selected the logic
    """

    model_config = ConfigDict(frozen=True)

    keywords: Tuple[str, ...] = Field(..., min_length=1, description="Keywords to search for")
    logic: LogicMode = Field(LogicMode.OR, description="Keyword combination logic")
    logic_explicit: bool = Field(False, description="Whether an operator token selected the logic")

    _lowered_keywords: Tuple[str, ...] = PrivateAttr(default=())

    @field_validator('keywords', mode='before')
    @classmethod
    def validate_keywords(cls, v) -> Tuple[str, ...]:
        """Trim keywords and reject blank entries."""
        if isinstance(v, str):
            v = [v]

        normalized = []
        for keyword in v:
            if keyword is None or not str(keyword).strip():
                raise ValueError("Keywords cannot be blank")
            normalized.append(str(keyword).strip())

        return tuple(normalized)

    @field_validator('logic', mode='before')
    @classmethod
    def validate_logic(cls, v) -> LogicMode:
        """Validate and convert logic to enum."""
        if isinstance(v, str):
            try:
                return LogicMode(v.strip().lower())
            except ValueError:
                raise ValueError(f"Invalid logic mode: {v}")
        return v

    def model_post_init(self, __context) -> None:
        """Fold keywords to lower case once for the matcher."""
        self._lowered_keywords = tuple(keyword.lower() for keyword in self.keywords)

    @property
    def lowered_keywords(self) -> Tuple[str, ...]:
        """Keywords folded to lower case for containment checks."""
        return self._lowered_keywords

    def is_single_keyword(self) -> bool:
        """Check if the logic mode is irrelevant because only one keyword is present."""
        return len(self.keywords) == 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data = self.model_dump()
        data['keywords'] = list(self.keywords)
        data['logic'] = self.logic.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FilterConfig':
        """Create a FilterConfig instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        """String representation of the filter configuration."""
        joiner = f" {self.logic.value.upper()} "
        return joiner.join(repr(keyword) for keyword in self.keywords)
