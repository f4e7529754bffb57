#  Copyright (c) 2025 Tom Villani, Ph.D.
"""tagdown - convert HTML fragments into Markdown.

tagdown walks a BeautifulSoup tree and turns emphasis, links, images,
lists, block quotes, paragraphs and line breaks into their Markdown
equivalents. Tags without a conversion rule are kept, escaped, removed or
rejected according to the configured unknown tag policy.

Examples
--------
Basic usage:

    >>> from tagdown import convert
    >>> convert('<b>Derpy</b> <strong>Herpy</strong>')
    '**Derpy** **Herpy**'

Starting from a custom state:

    >>> from tagdown import ConversionState, convert_custom
    >>> convert_custom('<x-note>hi</x-note>', ConversionState(unknown_tag_policy="remove"))
    ''

"""

from __future__ import annotations

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "tagdown requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from tagdown.converter import HTMLToMarkdown, convert, convert_custom, html_to_markdown, transduce  # noqa: E402
from tagdown.exceptions import (  # noqa: E402
    ConversionError,
    DependencyError,
    InputError,
    ParsingError,
    TagdownError,
    UnknownTagError,
    ValidationError,
)
from tagdown.options import HtmlOptions  # noqa: E402
from tagdown.state import ConversionState  # noqa: E402

__all__ = [
    "__version__",
    "convert",
    "convert_custom",
    "html_to_markdown",
    "transduce",
    "HTMLToMarkdown",
    "HtmlOptions",
    "ConversionState",
    "TagdownError",
    "ValidationError",
    "InputError",
    "ParsingError",
    "DependencyError",
    "ConversionError",
    "UnknownTagError",
]
