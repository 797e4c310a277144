#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the org2bb library.

This module defines the exception classes raised while loading document
trees and transcoding them into BBCode.

Exception Hierarchy
-------------------
- Org2BBError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - ParsingError (malformed serialized document trees)

  - RenderingError (output generation failures)
    - UnsupportedConstructError (node kind, link scheme, list type, headline
      level or footnote the BBCode dialect cannot express)
    - OutputWriteError (file write failures)

"""

from typing import Any

from org2bb.constants import ConstructType


class Org2BBError(Exception):
    """Base exception class for all org2bb-specific errors.

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


class ValidationError(Org2BBError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    converter_name : str
        Name of the renderer that received the options
    expected_type : type
        The options class the renderer expects
    received_type : type
        The options class that was actually passed
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the renderer."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Org2BBError):
    """Exception raised when a serialized document tree cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Org2BBError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnsupportedConstructError(RenderingError):
    """Exception raised when the document uses something BBCode cannot express.

    A single unsupported construct aborts the whole transcoding pass; no
    partial output is produced.

    Parameters
    ----------
    construct : str
        Identifier of the offending construct (node kind, link scheme,
        list type, headline level or footnote label)
    construct_type : str, default "node"
        What kind of construct was rejected: "node", "link", "list",
        "headline" or "footnote"
    message : str, optional
        Custom message. A default naming the construct is generated if omitted.

    Attributes
    ----------
    construct : str
        The offending construct
    construct_type : str
        Category of the offending construct

    """

    def __init__(self, construct: str, construct_type: ConstructType = "node", message: str | None = None):
        """Initialize the error naming the unsupported construct."""
        if message is None:
            message = f"{construct_type.upper()} `{construct}' is not supported by the BBCode exporter"
        super().__init__(message, rendering_stage=construct_type)
        self.construct = construct
        self.construct_type = construct_type


class OutputWriteError(RenderingError):
    """Exception raised when rendered output cannot be written.

    Parameters
    ----------
    message : str
        Description of the write failure
    output_path : str, optional
        The destination that could not be written
    original_error : Exception, optional
        The underlying I/O exception

    """

    def __init__(self, message: str, output_path: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.output_path = output_path
