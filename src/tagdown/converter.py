#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML to Markdown conversion module.

This module converts an HTML fragment or document into Markdown by walking
the BeautifulSoup tree depth-first. Each child node is dispatched to the
rule registered for its tag in ``tagdown.handlers.TAG_HANDLERS``; the rule
receives a callback that converts the node's own children, so it can change
the formatting state for its subtree only.

Supported HTML Elements
-----------------------
- Text formatting: ``b``/``strong``, ``i``/``em``
- Structure: ``p``, ``br``, ``blockquote``
- Lists: ``ul``, ``ol``, ``li`` with nesting
- Links and images: ``a``, ``img``

Elements without a rule follow the unknown tag policy: kept verbatim,
kept but HTML-escaped, removed, or rejected with ``UnknownTagError``.

Dependencies
------------
- beautifulsoup4: For HTML parsing and tree navigation
- html5lib: Default tree builder, parses the way browsers do

Examples
--------
Basic HTML string conversion:

    >>> from tagdown import convert
    >>> convert('<i>I am <b>Derpy</b>, bitch!</i>')
    '*I am **Derpy**, bitch!*'

Reject markup that has no Markdown rule:

    >>> from tagdown import HTMLToMarkdown, HtmlOptions
    >>> converter = HTMLToMarkdown(HtmlOptions(unknown_tag_policy="panic"))
    >>> converter.convert('<table></table>')
    Traceback (most recent call last):
    ...
    tagdown.exceptions.UnknownTagError: Cannot process html tag table
"""

from __future__ import annotations

import html
import logging
from typing import Any

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import NavigableString, PreformattedString, Tag

from tagdown._input_utils import InputType, read_html_input
from tagdown.exceptions import ConversionError, DependencyError, ParsingError, TagdownError, UnknownTagError
from tagdown.handlers import TEXT_NODE, get_handler
from tagdown.options import HtmlOptions
from tagdown.state import ConversionState

logger = logging.getLogger(__name__)


def _render_unknown(state: ConversionState, node: Tag) -> str:
    """Apply the unknown tag policy to an element without a rule."""
    policy = state.unknown_tag_policy
    if policy == "remove":
        logger.debug("Removing unsupported tag <%s>", node.name)
        return ""
    if policy == "panic":
        raise UnknownTagError(node.name)
    rendered = str(node)
    if policy == "escape":
        return html.escape(rendered)
    return rendered


def transduce(state: ConversionState, node: Any) -> str:
    """Convert the children of ``node`` to Markdown.

    Parameters
    ----------
    state : ConversionState
        Formatting context for this level of the tree.
    node : bs4.Tag or bs4.BeautifulSoup
        Node whose children are converted, in document order.

    Returns
    -------
    str
        Concatenation of the fragments produced for every child.

    Raises
    ------
    UnknownTagError
        If a child has no rule and the policy is "panic".

    """
    parts: list[str] = []
    for child in node.children:
        if isinstance(child, PreformattedString):
            # comments, doctype, declarations, CDATA, processing instructions
            continue

        if isinstance(child, NavigableString):
            handler = get_handler(TEXT_NODE)
        else:
            handler = get_handler(child.name)

        if handler is None:
            parts.append(_render_unknown(state, child))
            continue

        def recurse(child_state: ConversionState, _child: Any = child) -> str:
            return transduce(child_state, _child)

        parts.append(handler(state, child, recurse))
    return "".join(parts)


class HTMLToMarkdown:
    """HTML to Markdown Converter.

    Parameters
    ----------
    options : HtmlOptions or None, default None
        Conversion options. Uses ``HtmlOptions()`` when omitted.

    """

    def __init__(self, options: HtmlOptions | None = None):
        self.options = options or HtmlOptions()

    def _parse(self, html_text: str) -> Any:
        """Parse trimmed HTML and return the ``<body>`` element traversal starts from."""
        parser = self.options.html_parser
        try:
            soup = BeautifulSoup(html_text.strip(), parser)
        except FeatureNotFound as e:
            raise DependencyError(
                f"Selected HtmlOptions.html_parser not found: {e}. Install the {parser!r} package.",
                missing_packages=[parser],
                original_error=e,
            ) from e
        except Exception as e:
            raise ParsingError(
                f"Failed to parse HTML: {e}", parsing_stage="html_parsing", original_error=e
            ) from e

        if soup.body is not None:
            return soup.body

        # "html.parser" leaves fragments unwrapped; <head> content is never converted
        if soup.head is not None:
            soup.head.decompose()
        return soup.html or soup

    def convert(self, html_text: str, state: ConversionState | None = None) -> str:
        """Convert an HTML string to Markdown.

        Parameters
        ----------
        html_text : str
            HTML fragment or document.
        state : ConversionState or None, default None
            Initial conversion state. Built from the options when omitted.

        Returns
        -------
        str
            The Markdown text.

        Raises
        ------
        ParsingError
            If the HTML cannot be parsed.
        ConversionError
            If the traversal fails; ``UnknownTagError`` under the "panic" policy.

        """
        if state is None:
            state = self.options.to_state()

        root = self._parse(html_text)
        logger.debug("Converting HTML (%d chars) with unknown_tag_policy=%s", len(html_text), state.unknown_tag_policy)

        try:
            result = transduce(state, root)
        except TagdownError:
            raise
        except RecursionError as e:
            raise ConversionError(
                "HTML document is nested too deeply to convert", conversion_stage="traversal", original_error=e
            ) from e
        except Exception as e:
            raise ConversionError(
                f"Failed to convert HTML to Markdown: {e}", conversion_stage="traversal", original_error=e
            ) from e

        if self.options.strip_output:
            result = result.strip()
        logger.debug("Produced %d chars of Markdown", len(result))
        return result


def convert(text: str) -> str:
    """Convert HTML to Markdown with the default state.

    Unknown tags are kept verbatim.
    """
    return HTMLToMarkdown().convert(text)


def convert_custom(text: str, state: ConversionState) -> str:
    """Convert HTML to Markdown starting from a caller-supplied state."""
    return HTMLToMarkdown().convert(text, state=state)


def html_to_markdown(input_data: InputType, options: HtmlOptions | None = None) -> str:
    """Convert HTML to Markdown format.

    Parameters
    ----------
    input_data : str, bytes, pathlib.Path, or file-like object
        HTML content to convert. Strings are always treated as HTML content;
        pass a ``pathlib.Path`` to read a file. Bytes and binary streams are
        decoded as UTF-8.
    options : HtmlOptions or None, default None
        Configuration options for HTML conversion. If None, uses default settings.

    Returns
    -------
    str
        Markdown representation of the HTML content.

    Raises
    ------
    InputError
        If input type is not supported or the source cannot be read
    ParsingError
        If HTML parsing fails
    ConversionError
        If the conversion fails

    Examples
    --------
    Convert HTML string directly:

        >>> html_to_markdown('<p>Content with <strong>bold</strong> text.</p>')
        '\\n\\nContent with **bold** text.\\n\\n'

    Convert a file and strip surrounding blank lines:

        >>> from pathlib import Path
        >>> markdown = html_to_markdown(Path('document.html'), HtmlOptions(strip_output=True))

    """
    html_content = read_html_input(input_data)
    return HTMLToMarkdown(options).convert(html_content)
