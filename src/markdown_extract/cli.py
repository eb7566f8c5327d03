"""Command-line entry point for markdown-extract."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from markdown_extract.config import MARKDOWN_EXTRACT_LOG_LEVEL
from markdown_extract.exceptions import MarkdownExtractError, NoMatchesError
from markdown_extract.extractor import ExtractionOptions, compile_pattern, extract
from markdown_extract.output import format_sections
from markdown_extract.sources import open_source

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the markdown-extract command.

    Returns:
        Parser accepting a pattern, an optional path and the display flags.
    """
    parser = argparse.ArgumentParser(
        prog="markdown-extract",
        description="Extract sections of a markdown file according to a regular expression.",
    )
    parser.add_argument(
        "-a", "--all", action="store_true", help="Print all matching sections (don't quit after first match)"
    )
    parser.add_argument(
        "-s", "--case-sensitive", action="store_true", help="Treat pattern as case sensitive"
    )
    parser.add_argument(
        "-n",
        "--no-print-matched-heading",
        action="store_true",
        help="Do not include the matched heading in the output",
    )
    parser.add_argument("--stdin", action="store_true", help="Read from stdin instead of a file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("pattern", help="Pattern to match against headings")
    parser.add_argument("path", nargs="?", help="Path to markdown file")
    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr.

    Args:
        verbose: If True, log at DEBUG; otherwise use the configured level.
    """
    level = logging.DEBUG if verbose else MARKDOWN_EXTRACT_LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(argv: Sequence[str] | None = None) -> str:
    """Parse arguments, extract sections and return the text to print.

    Args:
        argv: Command-line arguments without the program name. Defaults to
            ``sys.argv[1:]``.

    Returns:
        The selected sections, one newline-terminated line each.

    Raises:
        MarkdownExtractError: On pattern, source or no-match failures.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.path is not None and args.stdin:
        parser.error("Must supply a path or --stdin, but not both")
    if args.path is None and not args.stdin:
        parser.error("Must supply a path or --stdin")

    options = ExtractionOptions(
        all_matches=args.all,
        case_sensitive=args.case_sensitive,
        include_heading=not args.no_print_matched_heading,
    )
    matcher = compile_pattern(args.pattern, case_sensitive=options.case_sensitive)

    with open_source(args.path, use_stdin=args.stdin) as source:
        sections = extract(source, matcher, case_sensitive=options.case_sensitive)

    if not sections:
        raise NoMatchesError()

    logger.info("Found %d matching sections", len(sections))
    return format_sections(
        sections,
        all_matches=options.all_matches,
        include_heading=options.include_heading,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and translate failures into an exit status.

    Args:
        argv: Command-line arguments without the program name.

    Returns:
        0 on success, 1 when extraction fails or nothing matches.
    """
    try:
        output = run(argv)
    except MarkdownExtractError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
