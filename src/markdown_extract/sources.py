"""Resolve the command-line input into a stream of Markdown lines."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import IO, Iterator

from markdown_extract.config import MARKDOWN_EXTRACT_ENCODING
from markdown_extract.exceptions import SourceError


@contextmanager
def open_source(
    path: str | None,
    *,
    use_stdin: bool,
    encoding: str = MARKDOWN_EXTRACT_ENCODING,
) -> Iterator[IO[str] | IO[bytes]]:
    """Open exactly one of a file path or standard input.

    Lines are split on ``\\n`` only; a lone ``\\r`` stays part of its line.

    Args:
        path: Path of the Markdown file, or None when reading stdin.
        use_stdin: If True, read from standard input.
        encoding: Text encoding used for files.

    Yields:
        A line iterator: a text file, or the binary stdin buffer when one
        is available.

    Raises:
        ValueError: If both or neither of ``path`` and ``use_stdin`` are given.
        SourceError: If the file cannot be opened.
    """
    if path is not None and use_stdin:
        raise ValueError("Must supply a path or --stdin, but not both")
    if path is None and not use_stdin:
        raise ValueError("Must supply a path or --stdin")

    if use_stdin:
        yield getattr(sys.stdin, "buffer", sys.stdin)
        return

    try:
        handle = open(path, encoding=encoding, newline="\n")
    except OSError as exc:
        raise SourceError(f"Cannot open {path}: {exc}") from exc
    with handle:
        yield handle
