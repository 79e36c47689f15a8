#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the wkpdf library.

This module defines specialized exception classes for the error conditions
that can occur while preparing an HTML-to-PDF conversion. These exceptions
provide more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- WkPdfError (base exception)

  - ValidationError (missing or empty arguments, invalid option values)
    - InvalidOptionsError (wrong options class handed to the converter)

  - ConfigurationError (configuration files that cannot be read or parsed)

  - RenderingError (rendering engine failures)

"""

from typing import Any


class WkPdfError(Exception):
    """Base exception class for all wkpdf-specific errors.

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


class ValidationError(WkPdfError):
    """Exception raised for invalid or missing input arguments.

    Raised synchronously, before any rendering engine is created, when a
    required argument is empty or absent.

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


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong type is provided.

    Parameters
    ----------
    expected_type : type
        The expected options class type
    received_type : type
        The actual type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(self, expected_type: type, received_type: type, message: str | None = None):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"Expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigurationError(WkPdfError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path to the offending configuration file
    original_error : Exception, optional
        The underlying decode or I/O error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class RenderingError(WkPdfError):
    """Exception raised when the rendering engine fails.

    Engines should raise this for subprocess or rendering failures. The
    converter logs it and re-raises it unchanged.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    exit_code : int, optional
        Exit code of the renderer process, when known
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, exit_code: int | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.exit_code = exit_code


__all__ = [
    "WkPdfError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigurationError",
    "RenderingError",
]
