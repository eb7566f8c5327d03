"""Extraction driver: feeds a line source through the state machine."""

from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable

from markdown_extract.config import (
    MARKDOWN_EXTRACT_ENCODING,
    MARKDOWN_EXTRACT_PATTERN_SIZE_LIMIT,
)
from markdown_extract.exceptions import PatternError, SourceError
from markdown_extract.output import select_sections
from markdown_extract.schemas import ExtractionResult, Section
from markdown_extract.state import ExtractionState, advance, finish

logger = logging.getLogger(__name__)


@dataclass
class ExtractionOptions:
    """Options for section extraction and display.

    Attributes:
        all_matches: If True, keep every matching section instead of only
            the first one.
        case_sensitive: If True, match the pattern case-sensitively.
        include_heading: If False, drop the matched heading line when
            rendering a section.
    """

    all_matches: bool = False
    case_sensitive: bool = False
    include_heading: bool = True


def compile_pattern(
    pattern: str | re.Pattern[str], *, case_sensitive: bool = False
) -> re.Pattern[str]:
    """Compile a heading pattern with the requested case sensitivity.

    Already-compiled patterns are recompiled so the flag always applies.

    Raises:
        PatternError: If the pattern is too large or is not a valid regex.
    """
    if isinstance(pattern, re.Pattern):
        source, flags = pattern.pattern, pattern.flags & ~re.IGNORECASE
    else:
        source, flags = pattern, 0
    if not isinstance(source, str):
        raise PatternError("Pattern must be a text pattern, not bytes")
    if len(source) > MARKDOWN_EXTRACT_PATTERN_SIZE_LIMIT:
        raise PatternError(
            f"Pattern is {len(source)} characters long; "
            f"the limit is {MARKDOWN_EXTRACT_PATTERN_SIZE_LIMIT}"
        )
    if not case_sensitive:
        flags |= re.IGNORECASE
    try:
        return re.compile(source, flags)
    except re.error as exc:
        raise PatternError(f"Invalid pattern {source!r}: {exc}") from exc


def extract(
    source: Iterable[str] | Iterable[bytes] | IO[str] | IO[bytes],
    pattern: str | re.Pattern[str],
    *,
    case_sensitive: bool = False,
) -> list[Section]:
    """Extract every section whose heading matches ``pattern``.

    Args:
        source: Lines of Markdown. Text streams, binary streams (decoded as
            UTF-8) and plain iterables of strings are accepted.
        pattern: Regular expression searched for in each heading's text.
        case_sensitive: If True, match the pattern case-sensitively.

    Returns:
        Matching sections in document order. Empty if nothing matched.

    Raises:
        PatternError: If the pattern cannot be compiled. Raised before any
            line is read.
        SourceError: If the source cannot be read or decoded.
        TypeError: If ``source`` is a whole document as ``str`` or ``bytes``
            instead of an iterable of lines.
    """
    if isinstance(source, (str, bytes, bytearray)):
        raise TypeError(
            "source must be an iterable of lines; use extract_from_text for a string"
        )
    matcher = compile_pattern(pattern, case_sensitive=case_sensitive)
    state = ExtractionState()
    line_count = 0

    try:
        for raw_line in source:
            state = advance(state, _strip_line_ending(_decode(raw_line)), matcher)
            line_count += 1
    except UnicodeDecodeError as exc:
        raise SourceError(f"Failed to decode line {line_count + 1}: {exc}") from exc
    except OSError as exc:
        raise SourceError(f"Failed to read source: {exc}") from exc

    sections = finish(state)
    logger.debug(
        "Read %d lines, found %d sections matching %r",
        line_count,
        len(sections),
        matcher.pattern,
    )
    return sections


def extract_from_text(
    text: str, pattern: str | re.Pattern[str], *, case_sensitive: bool = False
) -> list[Section]:
    """Extract matching sections from an in-memory document."""
    return extract(io.StringIO(text), pattern, case_sensitive=case_sensitive)


def extract_from_path(
    path: str | Path,
    pattern: str | re.Pattern[str],
    *,
    case_sensitive: bool = False,
    encoding: str = MARKDOWN_EXTRACT_ENCODING,
) -> list[Section]:
    """Extract matching sections from a file on disk.

    Lines are split on ``\\n`` only, as for any other source.

    Raises:
        PatternError: If the pattern cannot be compiled.
        SourceError: If the file cannot be opened, read or decoded.
    """
    matcher = compile_pattern(pattern, case_sensitive=case_sensitive)
    try:
        handle = open(path, encoding=encoding, newline="\n")
    except OSError as exc:
        raise SourceError(f"Cannot open {path}: {exc}") from exc
    with handle:
        return extract(handle, matcher, case_sensitive=case_sensitive)


def extract_result(
    source: Iterable[str] | Iterable[bytes] | IO[str] | IO[bytes],
    pattern: str,
    options: ExtractionOptions | None = None,
) -> ExtractionResult:
    """Run an extraction and wrap it in an ExtractionResult.

    When ``options.all_matches`` is False only the first section is kept.
    """
    opts = options or ExtractionOptions()
    sections = extract(source, pattern, case_sensitive=opts.case_sensitive)
    return ExtractionResult(
        pattern=pattern,
        case_sensitive=opts.case_sensitive,
        sections=select_sections(sections, all_matches=opts.all_matches),
    )


def _decode(line: str | bytes) -> str:
    if isinstance(line, bytes):
        return line.decode("utf-8")
    return line


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line
