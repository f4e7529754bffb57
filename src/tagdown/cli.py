#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for tagdown.

Usage examples:
    # Convert a file and print Markdown to stdout
    tagdown page.html

    # Read from stdin, write to a file, drop unsupported tags
    cat page.html | tagdown - --out page.md --unknown-tags remove

    # Fail on the first tag without a conversion rule
    tagdown page.html --unknown-tags panic
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from tagdown import __version__
from tagdown.constants import DEFAULT_HTML_PARSER, DEFAULT_UNKNOWN_TAG_POLICY, HTML_PARSERS, UNKNOWN_TAG_POLICIES
from tagdown.converter import html_to_markdown
from tagdown.exceptions import TagdownError
from tagdown.logging_utils import configure_logging
from tagdown.options import HtmlOptions

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tagdown",
        description="Convert HTML to Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="HTML file to convert, or '-' to read from stdin (default: stdin)",
    )
    parser.add_argument("--out", "-o", type=str, help="Write Markdown to this file instead of stdout")
    parser.add_argument(
        "--unknown-tags",
        choices=UNKNOWN_TAG_POLICIES,
        default=DEFAULT_UNKNOWN_TAG_POLICY,
        help="How to handle tags without a conversion rule (default: %(default)s)",
    )
    parser.add_argument(
        "--strip",
        action="store_true",
        help="Strip leading and trailing whitespace from the output",
    )
    parser.add_argument(
        "--parser",
        choices=HTML_PARSERS,
        default=DEFAULT_HTML_PARSER,
        help="BeautifulSoup tree builder (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log records to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    parser.add_argument("--version", "-v", action="version", version=f"tagdown {__version__}")
    return parser


def _read_input(source: str) -> str | bytes | Path:
    if source == "-":
        stream = getattr(sys.stdin, "buffer", sys.stdin)
        return stream.read()
    return Path(source)


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    options = HtmlOptions(
        unknown_tag_policy=parsed_args.unknown_tags,
        strip_output=parsed_args.strip,
        html_parser=parsed_args.parser,
    )

    try:
        markdown_content = html_to_markdown(_read_input(parsed_args.input), options)
    except TagdownError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if parsed_args.out:
        output_path = Path(parsed_args.out)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(markdown_content, encoding="utf-8")
        except OSError as e:
            print(f"Error: Failed to write {output_path}: {e}", file=sys.stderr)
            return 1
        logger.info("Converted %s -> %s", parsed_args.input, output_path)
    else:
        print(markdown_content)

    return 0
