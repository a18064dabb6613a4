#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the pandoc_filter library.

This module defines the exception classes raised by the filter driver,
the document codec and the element constructors. The tree walker itself
raises nothing of its own: an exception raised inside a filter action
propagates to the caller unchanged.

Exception Hierarchy
-------------------
- PandocFilterError (base exception)

  - ValidationError (parameter/argument validation)
    - ArityError (element constructed with the wrong number of arguments)
    - ActionLoadError (filter action could not be resolved)

  - ParsingError (input document decoding failures)

  - RenderingError (output document encoding failures)

"""

from typing import Any


class PandocFilterError(Exception):
    """Base exception class for all pandoc_filter-specific errors.

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


class ValidationError(PandocFilterError):
    """Exception raised for invalid input parameters or options.

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


class ArityError(ValidationError):
    """Exception raised when an element constructor gets the wrong argument count.

    Parameters
    ----------
    tag : str
        Element tag being constructed (e.g. ``"Header"``)
    expected : int
        Number of payload components the tag requires
    given : int
        Number of arguments actually supplied

    """

    def __init__(self, tag: str, expected: int, given: int):
        """Initialize the arity error."""
        super().__init__(
            f"{tag} expects {expected} arguments, but given {given}",
            parameter_name="args",
            parameter_value=given,
        )
        self.tag = tag
        self.expected = expected
        self.given = given


class ActionLoadError(ValidationError):
    """Exception raised when a filter action specification cannot be resolved.

    Parameters
    ----------
    action_spec : str
        The specification that failed to load (``module:attr``, ``file.py:attr``
        or an entry point name)
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The underlying import or attribute error

    """

    def __init__(self, action_spec: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the action load error."""
        if message is None:
            message = f"Could not load filter action: {action_spec}"
        super().__init__(
            message, parameter_name="action", parameter_value=action_spec, original_error=original_error
        )
        self.action_spec = action_spec


class ParsingError(PandocFilterError):
    """Exception raised when the input document cannot be decoded.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage where parsing failed (e.g. "json", "document")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class RenderingError(PandocFilterError):
    """Exception raised when the output document cannot be encoded or written.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage where rendering failed (e.g. "json", "write")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


__all__ = [
    "PandocFilterError",
    "ValidationError",
    "ArityError",
    "ActionLoadError",
    "ParsingError",
    "RenderingError",
]
