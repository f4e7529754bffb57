#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Per-tag conversion rules.

Every rule has the same signature ``handler(state, node, recurse) -> str``:

- ``state`` is the ``ConversionState`` of the enclosing frame,
- ``node`` is the BeautifulSoup node being converted,
- ``recurse`` converts the node's children with the state it is given.

A rule that needs a scoped change passes a modified copy of ``state`` to
``recurse``. Rules never touch the tree and never call each other directly;
dispatch goes through ``TAG_HANDLERS``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping

from bs4 import Tag

from tagdown.constants import (
    BLOCKQUOTE_PREFIX,
    BOLD_MARKER,
    ITALIC_MARKER,
    LINE_BREAK,
    LIST_INDENT_UNIT,
    ORDERED_LIST_MARKER,
    PARAGRAPH_SEPARATOR,
    UNORDERED_LIST_MARKER,
)
from tagdown.state import ConversionState

Recurse = Callable[[ConversionState], str]
TagHandler = Callable[[ConversionState, Any, Recurse], str]

# Dispatch key for plain text leaves
TEXT_NODE = "#text"


def _get_attr(node: Tag, name: str) -> str:
    """Return an attribute value as a string, empty when absent."""
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def _title_clause(title: str) -> str:
    return f' "{title}"' if title else ""


def handle_text(state: ConversionState, node: Any, recurse: Recurse) -> str:
    """Emit a text leaf unchanged."""
    return str(node)


def handle_bold(state: ConversionState, node: Tag, recurse: Recurse) -> str:
    """Wrap trimmed content of ``<b>``/``<strong>`` in bold markers."""
    inner = recurse(state.create_updated(is_bold=True))
    return f"{BOLD_MARKER}{inner.strip()}{BOLD_MARKER}"


def handle_italic(state: ConversionState, node: Tag, recurse: Recurse) -> str:
    """Wrap trimmed content of ``<i>``/``<em>`` in italic markers."""
    inner = recurse(state.create_updated(is_italic=True))
    return f"{ITALIC_MARKER}{inner.strip()}{ITALIC_MARKER}"


def handle_line_break(state: ConversionState, node: Tag, recurse: Recurse) -> str:
    return LINE_BREAK


def handle_paragraph(state: ConversionState, node: Tag, recurse: Recurse) -> str:
    inner = recurse(state)
    return f"{PARAGRAPH_SEPARATOR}{inner.strip()}{PARAGRAPH_SEPARATOR}"


def handle_list(state: ConversionState, node: Tag, recurse: Recurse) -> str:
    """Convert ``<ul>``/``<ol>`` one nesting level deeper.

    A list nested inside another list item starts on its own line; a
    top-level list is returned as is.
    """
    inner = recurse(state.create_updated(list_depth=state.list_depth + 1))
    if state.list_depth > 0:
        return "\n" + inner
    return inner


def handle_list_item(state: ConversionState, node: Tag, recurse: Recurse) -> str:
    """Convert ``<li>`` into an indented, marked line.

    Only items followed by a sibling get a trailing newline, so the last
    item of a list never leaves a blank line behind it.
    """
    indent = LIST_INDENT_UNIT * max(state.list_depth - 1, 0)
    inner = recurse(state)

    parent = node.parent
    if parent is not None and parent.name == "ol":
        marker = ORDERED_LIST_MARKER
    else:
        marker = UNORDERED_LIST_MARKER

    result = f"{indent}{marker}{inner.strip()}"
    if node.next_sibling is not None:
        result += "\n"
    return result


def handle_blockquote(state: ConversionState, node: Tag, recurse: Recurse) -> str:
    """Prefix every line of the trimmed content with ``> ``."""
    inner = recurse(state).strip()
    return "\n".join(f"{BLOCKQUOTE_PREFIX}{line}" for line in inner.split("\n"))


def handle_anchor(state: ConversionState, node: Tag, recurse: Recurse) -> str:
    """Render ``<a>`` as an inline link with an optional title."""
    text = recurse(state).strip()
    href = _get_attr(node, "href").strip()
    title = _get_attr(node, "title").strip()
    return f"[{text}]({href}{_title_clause(title)})"


def handle_image(state: ConversionState, node: Tag, recurse: Recurse) -> str:
    """Render ``<img>`` from its attributes; children are ignored."""
    src = _get_attr(node, "src").strip()
    alt = _get_attr(node, "alt").strip()
    title = _get_attr(node, "title").strip()
    return f"![{alt}]({src}{_title_clause(title)})"


def _build_registry(rules: list[tuple[tuple[str, ...], TagHandler]]) -> Mapping[str, TagHandler]:
    registry: dict[str, TagHandler] = {}
    for tag_names, handler in rules:
        for tag_name in tag_names:
            if tag_name in registry:
                raise ValueError(f"Tag {tag_name!r} is claimed by more than one handler")
            registry[tag_name] = handler
    return MappingProxyType(registry)


TAG_HANDLERS: Mapping[str, TagHandler] = _build_registry(
    [
        ((TEXT_NODE,), handle_text),
        (("b", "strong"), handle_bold),
        (("i", "em"), handle_italic),
        (("br",), handle_line_break),
        (("p",), handle_paragraph),
        (("ul", "ol"), handle_list),
        (("li",), handle_list_item),
        (("blockquote",), handle_blockquote),
        (("a",), handle_anchor),
        (("img",), handle_image),
    ]
)


def get_handler(tag_name: str) -> TagHandler | None:
    """Look up the rule for a tag name, or None when no rule claims it."""
    return TAG_HANDLERS.get(tag_name)
