#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the notemark library.

This module defines specialized exception classes for the error conditions
that can occur while reading note documents, rendering them, exporting them
and serving them through share links.

Exception Hierarchy
-------------------
- NotemarkError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)

  - FormatError (unsupported output formats)

  - ParsingError (input document parsing failures)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

  - ExportError (export/print hand-off failures)

  - ShareError (public share link access)
    - ShareNotFoundError
    - ShareRevokedError
    - ShareExpiredError

"""

from typing import Any


class NotemarkError(Exception):
    """Base exception class for all notemark-specific errors.

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


class ValidationError(NotemarkError):
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
    """Exception raised when an incorrect options class is provided.

    For example, passing ``HtmlRendererOptions`` to the Markdown renderer.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
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
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(NotemarkError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input document cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FormatError(NotemarkError):
    """Exception raised when an unsupported output format is requested.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The unsupported format name
    supported_formats : list[str], optional
        List of supported formats for reference
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if format_type:
                message = f"Unsupported export format: '{format_type}'"
                if supported_formats:
                    message += f". Supported formats: {', '.join(supported_formats)}"
            else:
                message = "Export format is not supported"

        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class ParsingError(NotemarkError):
    """Exception raised when a note document cannot be read.

    Raised for undecodable JSON input and, when ``strict_mode`` is enabled,
    for malformed node shapes.

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


class RenderingError(NotemarkError):
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


class OutputWriteError(RenderingError):
    """Exception raised when writing an output file fails."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class ExportError(NotemarkError):
    """Exception raised when an export cannot be handed off to the user.

    This is the single generic failure surfaced for the print-to-PDF path,
    e.g. when no browser window can be opened for printing.

    """


class ShareError(NotemarkError):
    """Base exception for public share link access failures.

    Parameters
    ----------
    message : str
        Description of the failure, suitable for showing to the visitor
    status_code : int
        HTTP status a web layer should answer with

    """

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None, original_error: Exception | None = None):
        """Initialize the share error."""
        super().__init__(message, original_error)
        if status_code is not None:
            self.status_code = status_code


class ShareNotFoundError(ShareError):
    """Raised when no share exists for a token."""

    status_code = 404

    def __init__(self, message: str = "Shared note not found"):
        """Initialize the not found error."""
        super().__init__(message)


class ShareRevokedError(ShareError):
    """Raised when a share exists but is no longer public."""

    status_code = 403

    def __init__(self, message: str = "This note is no longer shared"):
        """Initialize the revoked error."""
        super().__init__(message)


class ShareExpiredError(ShareError):
    """Raised when a share link is past its expiry time."""

    status_code = 410

    def __init__(self, message: str = "This share link has expired"):
        """Initialize the expired error."""
        super().__init__(message)


__all__ = [
    "NotemarkError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "FormatError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "ExportError",
    "ShareError",
    "ShareNotFoundError",
    "ShareRevokedError",
    "ShareExpiredError",
]
