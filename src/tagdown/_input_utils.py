#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Input validation and reading helpers for tagdown entry points."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Union

from tagdown.exceptions import InputError

logger = logging.getLogger(__name__)

InputType = Union[str, bytes, Path, IO[str], IO[bytes]]


def is_file_like(obj: Any) -> bool:
    """Check if an object behaves like a readable file.

    Parameters
    ----------
    obj : Any
        Object to check

    Returns
    -------
    bool
        True if the object has a callable ``read`` method

    """
    return callable(getattr(obj, "read", None))


def _decode(data: bytes, source: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputError(
            f"Input from {source} is not valid UTF-8: {e}",
            parameter_name="input_data",
            original_error=e,
        ) from e


def read_html_input(input_data: InputType) -> str:
    """Read HTML text from any supported input source.

    Parameters
    ----------
    input_data : str, bytes, pathlib.Path, or file-like object
        A string is taken as HTML content, never as a file name. Bytes and
        binary streams are decoded as UTF-8.

    Returns
    -------
    str
        The HTML text

    Raises
    ------
    InputError
        If the input type is unsupported or the source cannot be read

    """
    if isinstance(input_data, str):
        return input_data

    if isinstance(input_data, bytes):
        return _decode(input_data, "bytes")

    if isinstance(input_data, Path):
        if not input_data.is_file():
            raise InputError(
                f"File does not exist: {input_data}",
                parameter_name="input_data",
                parameter_value=input_data,
            )
        logger.debug("Reading HTML from %s", input_data)
        try:
            return _decode(input_data.read_bytes(), str(input_data))
        except OSError as e:
            raise InputError(
                f"Failed to read HTML file {input_data}: {e}",
                parameter_name="input_data",
                parameter_value=input_data,
                original_error=e,
            ) from e

    if is_file_like(input_data):
        try:
            content = input_data.read()
        except OSError as e:
            raise InputError(
                f"Failed to read HTML stream: {e}", parameter_name="input_data", original_error=e
            ) from e
        if isinstance(content, bytes):
            return _decode(content, "stream")
        return content

    raise InputError(
        f"Unsupported input type: {type(input_data).__name__}. "
        "Supported types: HTML strings, bytes, pathlib.Path, file-like objects",
        parameter_name="input_data",
        parameter_value=input_data,
    )
