"""Select and render extracted sections for display."""

from __future__ import annotations

from typing import Iterable

from markdown_extract.schemas import Section


def select_sections(sections: list[Section], *, all_matches: bool) -> list[Section]:
    """Keep every section, or only the first one when ``all_matches`` is False."""
    if all_matches:
        return list(sections)
    return sections[:1]


def render_section(section: Section, *, include_heading: bool = True) -> list[str]:
    """Return the lines of a section, optionally without its heading line."""
    return list(section) if include_heading else list(section[1:])


def format_sections(
    sections: Iterable[Section],
    *,
    all_matches: bool = False,
    include_heading: bool = True,
) -> str:
    """Render selected sections as text, one newline-terminated line each."""
    selected = select_sections(list(sections), all_matches=all_matches)
    lines: list[str] = []
    for section in selected:
        lines.extend(render_section(section, include_heading=include_heading))
    return "".join(f"{line}\n" for line in lines)
