#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML-to-Markdown conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tagdown.constants import (
    DEFAULT_HTML_PARSER,
    DEFAULT_STRIP_OUTPUT,
    DEFAULT_UNKNOWN_TAG_POLICY,
    HTML_PARSERS,
    UNKNOWN_TAG_POLICIES,
    HtmlParser,
    UnknownTagPolicy,
)
from tagdown.options.base import CloneFrozenMixin, validate_choice

if TYPE_CHECKING:
    from tagdown.state import ConversionState


@dataclass(frozen=True)
class HtmlOptions(CloneFrozenMixin):
    """Configuration options for HTML-to-Markdown conversion.

    Parameters
    ----------
    unknown_tag_policy : {"keep", "escape", "remove", "panic"}, default "keep"
        Behavior for elements without a tag rule:

        - "keep": render the element's HTML verbatim
        - "escape": render the element's HTML with entities escaped
        - "remove": drop the element and everything inside it
        - "panic": abort the conversion with UnknownTagError
    strip_output : bool, default False
        Strip leading and trailing whitespace from the final Markdown.
    html_parser : {"html5lib", "html.parser", "lxml"}, default "html5lib"
        BeautifulSoup tree builder. "html5lib" parses like a browser: it
        always produces ``<html>``/``<body>`` and closes ``<li>`` and ``<p>``
        implicitly. "html.parser" and "lxml" are faster but can nest
        unclosed items differently.

    Examples
    --------
    Drop unsupported markup instead of passing it through:
        >>> options = HtmlOptions(unknown_tag_policy="remove")

    """

    unknown_tag_policy: UnknownTagPolicy = field(
        default=DEFAULT_UNKNOWN_TAG_POLICY,
        metadata={
            "help": "How to handle tags without a conversion rule",
            "choices": list(UNKNOWN_TAG_POLICIES),
        },
    )
    strip_output: bool = field(
        default=DEFAULT_STRIP_OUTPUT,
        metadata={"help": "Strip leading and trailing whitespace from the output"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": (
                "BeautifulSoup parser to use: 'html5lib' (standards-compliant, matches browser behavior), "
                "'html.parser' (built-in, fast, does not close tags implicitly), "
                "'lxml' (fast, requires C library)"
            ),
            "choices": list(HTML_PARSERS),
        },
    )

    def __post_init__(self) -> None:
        """Validate the unknown tag policy and the parser name.

        Raises
        ------
        ValidationError
            If either value is not one of its supported choices.

        """
        validate_choice("unknown_tag_policy", self.unknown_tag_policy, UNKNOWN_TAG_POLICIES)
        validate_choice("html_parser", self.html_parser, HTML_PARSERS)

    def to_state(self) -> ConversionState:
        """Build the initial conversion state for these options."""
        from tagdown.state import ConversionState

        return ConversionState(unknown_tag_policy=self.unknown_tag_policy)
