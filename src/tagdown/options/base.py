#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared base for the immutable option and state records.

Both ``HtmlOptions`` and ``ConversionState`` are frozen; callers derive a
changed copy with ``create_updated()`` and the original stays valid for
anyone else holding it.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any, Sequence

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from tagdown.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


def validate_choice(parameter_name: str, value: Any, choices: Sequence[str]) -> None:
    """Check that an option value is one of its allowed choices.

    Raises
    ------
    ValidationError
        If ``value`` is not in ``choices``.

    """
    if value not in choices:
        raise ValidationError(
            f"{parameter_name} must be one of {', '.join(choices)}, got {value!r}",
            parameter_name=parameter_name,
            parameter_value=value,
        )
