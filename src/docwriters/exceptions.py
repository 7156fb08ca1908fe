#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the docwriters library.

This module defines the exception classes raised while configuring and
running the document writers. Rendering itself never fails on a well-formed
tree; the exceptions below cover configuration mistakes and adversarial input.

Exception Hierarchy
-------------------
- DocWritersError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)
    - TemplateError (standalone template missing or malformed)

  - RenderingError (output generation failures)
    - NestingDepthError (input tree nested deeper than allowed)
    - OutputWriteError (file write failures)

"""

from typing import Any


class DocWritersError(Exception):
    """Base exception class for all docwriters-specific errors.

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


class ValidationError(DocWritersError):
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
    """Exception raised when a renderer receives options of the wrong class.

    Parameters
    ----------
    converter_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the renderer."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class TemplateError(ValidationError):
    """Exception raised when standalone output cannot be templated.

    Raised when a template file is missing or unreadable, when the template
    source does not compile, or when it references an undefined variable.

    Parameters
    ----------
    message : str
        Description of the template problem
    template_name : str, optional
        File name or label of the offending template
    original_error : Exception, optional
        The Jinja2 exception that caused this error

    """

    def __init__(self, message: str, template_name: str | None = None, original_error: Exception | None = None):
        """Initialize the template error."""
        super().__init__(
            message, parameter_name="template", parameter_value=template_name, original_error=original_error
        )
        self.template_name = template_name


class RenderingError(DocWritersError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class NestingDepthError(RenderingError):
    """Exception raised when the document tree is nested too deeply.

    Parameters
    ----------
    max_depth : int
        The configured nesting limit that was exceeded
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The RecursionError raised by the interpreter, when the walk itself ran out of stack

    """

    def __init__(self, max_depth: int, message: str | None = None, original_error: Exception | None = None):
        """Initialize the nesting depth error."""
        if message is None:
            message = f"Document tree exceeds the maximum nesting depth of {max_depth}"
        super().__init__(message, rendering_stage="traversal", original_error=original_error)
        self.max_depth = max_depth


class OutputWriteError(RenderingError):
    """Exception raised when writing output fails.

    Parameters
    ----------
    file_path : str
        Path (or stream description) of the output that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path
