"""Recognize ATX heading lines."""

from __future__ import annotations

import re

from markdown_extract.schemas import Heading

# Seven or more markers do not form a heading; closing markers stay in the text.
_HEADING_RE = re.compile(r"^(?P<markers>#{1,6})\s+(?P<content>\S.*)$")


def parse_heading(line: str) -> Heading | None:
    """Parse a single line as a Markdown heading.

    Args:
        line: One line of text, without its line terminator.

    Returns:
        The heading's depth and trimmed text, or None if the line is not a
        heading.
    """
    match = _HEADING_RE.match(line)
    if match is None:
        return None
    return Heading(
        depth=len(match.group("markers")),
        content=match.group("content").strip(),
    )
