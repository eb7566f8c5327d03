"""Extraction output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Lines of one captured section, heading line first.
Section = list[str]


class ExtractionResult(BaseModel):
    """Sections captured from one document, in document order.

    Attributes:
        pattern: The heading pattern that was searched for.
        case_sensitive: Whether the pattern was matched case-sensitively.
        sections: Every matching section, each a list of raw lines.
    """

    pattern: str
    case_sensitive: bool = False
    sections: list[Section] = Field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of captured sections."""
        return len(self.sections)

    @property
    def first(self) -> Section | None:
        """First matching section, or None when nothing matched."""
        return self.sections[0] if self.sections else None
