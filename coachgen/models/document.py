"""
Structured document models.

Sandi Metz Principles:
- Small classes focused on parsed content
- Tagged by structural role, never by visual style
- Immutable data structures
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SectionKind(str, Enum):
    """Structural role of a parsed section."""

    DAY_HEADER = "day_header"
    FOCUS_LINE = "focus_line"
    SUBHEADING = "subheading"
    BULLET_DETAIL = "bullet_detail"
    PLAIN = "plain"


class Section(BaseModel):
    """One tagged piece of parsed content."""

    model_config = ConfigDict(frozen=True)

    kind: SectionKind = Field(..., description="Structural role")
    text: str = Field(..., description="Section text as it appeared")
    parent_day: Optional[str] = Field(
        None, description="Header of the enclosing day block, if any"
    )


class StructuredDocument(BaseModel):
    """Ordered, flat sequence of sections."""

    model_config = ConfigDict(frozen=True)

    sections: List[Section] = Field(default_factory=list, description="Sections")

    @property
    def is_empty(self) -> bool:
        """Check if document has no sections."""
        return not self.sections

    def days(self) -> List[str]:
        """Get day headers in order of appearance."""
        return [s.text for s in self.sections if s.kind == SectionKind.DAY_HEADER]

    def sections_for_day(self, day: str) -> List[Section]:
        """
        Get sections belonging to a day block.

        Args:
            day: Day header text

        Returns:
            Sections whose parent_day matches, header included
        """
        return [s for s in self.sections if s.parent_day == day]


class ContentSource(str, Enum):
    """Where a generated document's text came from."""

    CACHE = "cache"
    NETWORK = "network"
    OFFLINE = "offline"


class GenerationResult(BaseModel):
    """Parsed document together with its origin."""

    model_config = ConfigDict(frozen=True)

    document: StructuredDocument = Field(..., description="Parsed content")
    source: ContentSource = Field(..., description="Origin of the raw text")

    @property
    def offline(self) -> bool:
        """Check if the document is an offline template."""
        return self.source == ContentSource.OFFLINE
