"""Shared schemas for markdown_extract."""

from markdown_extract.schemas.heading import Heading
from markdown_extract.schemas.result import ExtractionResult, Section

__all__ = ["ExtractionResult", "Heading", "Section"]
