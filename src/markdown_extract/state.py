"""Line-by-line state machine that captures matching sections."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from markdown_extract.heading import parse_heading
from markdown_extract.schemas import Section

FENCE_MARKER = "```"


@dataclass(frozen=True)
class ExtractionState:
    """Running state of a single extraction.

    Attributes:
        inside_code_block: True between an opening and a closing fence line.
        active_depth: Depth of the heading that opened the current section,
            or None when no section is open.
        current: Lines of the section being captured.
        results: Completed sections in document order.
    """

    inside_code_block: bool = False
    active_depth: int | None = None
    current: tuple[str, ...] | None = None
    results: tuple[tuple[str, ...], ...] = ()

    @property
    def within_matched_section(self) -> bool:
        """True while a matched section is being captured."""
        return self.active_depth is not None


def advance(state: ExtractionState, line: str, matcher: re.Pattern[str]) -> ExtractionState:
    """Apply one line of input to the state.

    Args:
        state: State after the previous line.
        line: The next line, without its line terminator.
        matcher: Compiled pattern searched for in heading text.

    Returns:
        The state after consuming ``line``.
    """
    if line.startswith(FENCE_MARKER):
        state = replace(state, inside_code_block=not state.inside_code_block)

    if not state.inside_code_block:
        heading = parse_heading(line)
        if heading is not None:
            if state.within_matched_section and heading.depth <= state.active_depth:
                state = close_section(state)

            if not state.within_matched_section and matcher.search(heading.content):
                state = replace(state, active_depth=heading.depth, current=())

    if state.within_matched_section:
        state = replace(state, current=state.current + (line,))

    return state


def close_section(state: ExtractionState) -> ExtractionState:
    """Move the open section, if any, into the results."""
    if state.current is None:
        return replace(state, active_depth=None)
    return replace(
        state,
        active_depth=None,
        current=None,
        results=state.results + (state.current,),
    )


def finish(state: ExtractionState) -> list[Section]:
    """Close any open section and return every captured section."""
    state = close_section(state)
    return [list(section) for section in state.results]
