"""markdown_extract: pull heading-rooted sections out of Markdown documents."""

from markdown_extract.exceptions import (
    MarkdownExtractError,
    NoMatchesError,
    PatternError,
    SourceError,
)
from markdown_extract.extractor import (
    ExtractionOptions,
    compile_pattern,
    extract,
    extract_from_path,
    extract_from_text,
    extract_result,
)
from markdown_extract.heading import parse_heading
from markdown_extract.schemas import ExtractionResult, Heading, Section
from markdown_extract.state import ExtractionState, advance, finish

__all__ = [
    "ExtractionOptions",
    "ExtractionResult",
    "ExtractionState",
    "Heading",
    "MarkdownExtractError",
    "NoMatchesError",
    "PatternError",
    "Section",
    "SourceError",
    "advance",
    "compile_pattern",
    "extract",
    "extract_from_path",
    "extract_from_text",
    "extract_result",
    "finish",
    "parse_heading",
]
