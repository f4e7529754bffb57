#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the tagdown library.

Constants are organized by category:
1. Type Definitions - Literal types for configurable modes
2. Markdown Formatting - Markers and separators emitted by the tag rules
3. Conversion Behavior - Defaults for conversion options
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

# Behavior for elements that no tag rule claims
UnknownTagPolicy = Literal["keep", "escape", "remove", "panic"]

UNKNOWN_TAG_POLICIES: tuple[str, ...] = ("keep", "escape", "remove", "panic")

# BeautifulSoup tree builders
HtmlParser = Literal["html.parser", "html5lib", "lxml"]

HTML_PARSERS: tuple[str, ...] = ("html.parser", "html5lib", "lxml")

# =============================================================================
# Markdown Formatting
# =============================================================================

BOLD_MARKER = "**"
ITALIC_MARKER = "*"

# Hard line break: trailing space followed by a newline
LINE_BREAK = " \n"

PARAGRAPH_SEPARATOR = "\n\n"

UNORDERED_LIST_MARKER = "* "
ORDERED_LIST_MARKER = "1. "

# One unit per nesting level below the top-level list
LIST_INDENT_UNIT = "\t"

BLOCKQUOTE_PREFIX = "> "

# =============================================================================
# Conversion Behavior
# =============================================================================

DEFAULT_UNKNOWN_TAG_POLICY: UnknownTagPolicy = "keep"
DEFAULT_STRIP_OUTPUT = False

# html5lib builds the document -> html -> body tree and closes <li> and <p> implicitly
DEFAULT_HTML_PARSER: HtmlParser = "html5lib"
