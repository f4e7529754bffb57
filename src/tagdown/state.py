#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Conversion state threaded through the tree traversal.

A ``ConversionState`` is an immutable record handed to every tag handler.
Handlers that need scoped changes (entering bold text, descending into a
nested list) derive a copy with ``create_updated()`` and pass that copy to
the recursion; the caller's instance and its siblings never see the change.
"""

from __future__ import annotations

from dataclasses import dataclass

from tagdown.constants import DEFAULT_UNKNOWN_TAG_POLICY, UNKNOWN_TAG_POLICIES, UnknownTagPolicy
from tagdown.exceptions import ValidationError
from tagdown.options.base import CloneFrozenMixin, validate_choice


@dataclass(frozen=True)
class ConversionState(CloneFrozenMixin):
    """Formatting context for one level of the traversal.

    Parameters
    ----------
    unknown_tag_policy : {"keep", "escape", "remove", "panic"}, default "keep"
        What to emit for elements that no tag rule claims.
    is_bold : bool, default False
        True while inside ``<b>``/``<strong>``.
    is_italic : bool, default False
        True while inside ``<i>``/``<em>``.
    list_depth : int, default 0
        Number of enclosing ``<ul>``/``<ol>`` containers.

    """

    unknown_tag_policy: UnknownTagPolicy = DEFAULT_UNKNOWN_TAG_POLICY
    is_bold: bool = False
    is_italic: bool = False
    list_depth: int = 0

    def __post_init__(self) -> None:
        """Validate the policy and list depth.

        Raises
        ------
        ValidationError
            If the policy is unknown or the depth is negative.

        """
        validate_choice("unknown_tag_policy", self.unknown_tag_policy, UNKNOWN_TAG_POLICIES)
        if self.list_depth < 0:
            raise ValidationError(
                f"list_depth must be non-negative, got {self.list_depth}",
                parameter_name="list_depth",
                parameter_value=self.list_depth,
            )
