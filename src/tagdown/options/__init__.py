#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for tagdown conversion.

Options are frozen dataclasses; use ``create_updated()`` to derive a
modified copy instead of mutating an existing instance.
"""

from __future__ import annotations

from tagdown.options.base import CloneFrozenMixin
from tagdown.options.html import HtmlOptions

__all__ = [
    "CloneFrozenMixin",
    "HtmlOptions",
]
