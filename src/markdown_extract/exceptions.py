"""Custom exceptions for markdown_extract."""


class MarkdownExtractError(Exception):
    """Base exception for markdown_extract operations."""


class PatternError(MarkdownExtractError):
    """Heading pattern is invalid or exceeds the size limit."""


class SourceError(MarkdownExtractError):
    """Markdown source could not be read or decoded."""


class NoMatchesError(MarkdownExtractError):
    """No section heading matched the pattern."""

    def __init__(self, message: str = "No matches found") -> None:
        super().__init__(message)
