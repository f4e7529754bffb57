#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the tagdown library.

This module defines the exception classes raised while reading HTML input,
parsing it into a tree and transducing that tree into Markdown. Conversion
is all-or-nothing: any of these errors aborts the whole conversion and no
partial output is returned.

Exception Hierarchy
-------------------
- TagdownError (base exception)

  - ValidationError (option/state validation)
    - InputError (unsupported or unreadable input)

  - ParsingError (HTML could not be parsed into a tree)

  - DependencyError (selected tree builder is not installed)

  - ConversionError (tree to Markdown traversal failures)
    - UnknownTagError (unrecognized tag under the "panic" policy)

"""

from typing import Any


class TagdownError(Exception):
    """Base exception class for all tagdown-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(TagdownError):
    """Exception raised for invalid option or state values.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InputError(ValidationError):
    """Exception raised when the conversion input cannot be used.

    Covers unsupported input types and sources that cannot be read
    (missing files, undecodable bytes).
    """


class ParsingError(TagdownError):
    """Exception raised when HTML cannot be parsed into a document tree.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class ConversionError(TagdownError):
    """Exception raised when transducing the document tree fails.

    Parameters
    ----------
    message : str
        Description of the conversion failure
    conversion_stage : str, optional
        The stage of conversion where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the failure

    Attributes
    ----------
    conversion_stage : str or None
        Where in the conversion the error occurred

    """

    def __init__(self, message: str, conversion_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the conversion error."""
        super().__init__(message, original_error)
        self.conversion_stage = conversion_stage


class UnknownTagError(ConversionError):
    """Exception raised for a tag without a handler under the "panic" policy.

    Parameters
    ----------
    tag_name : str
        Name of the unrecognized HTML tag
    message : str, optional
        Custom error message. Defaults to ``"Cannot process html tag <name>"``

    Attributes
    ----------
    tag_name : str
        Name of the unrecognized HTML tag

    """

    def __init__(self, tag_name: str, message: str | None = None):
        """Initialize the unknown tag error."""
        if message is None:
            message = f"Cannot process html tag {tag_name}"
        super().__init__(message, conversion_stage="traversal")
        self.tag_name = tag_name


class DependencyError(TagdownError):
    """Exception raised when the selected HTML tree builder is not installed.

    Parameters
    ----------
    message : str
        Description of the missing dependency
    missing_packages : list[str], optional
        Distribution names that need to be installed
    original_error : Exception, optional
        The underlying exception, usually ``bs4.FeatureNotFound``

    """

    def __init__(
        self, message: str, missing_packages: list[str] | None = None, original_error: Exception | None = None
    ):
        """Initialize the dependency error."""
        super().__init__(message, original_error)
        self.missing_packages = missing_packages or []


__all__ = [
    "TagdownError",
    "ValidationError",
    "InputError",
    "ParsingError",
    "DependencyError",
    "ConversionError",
    "UnknownTagError",
]
