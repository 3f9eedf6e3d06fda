#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the linediff library.

This module defines the exception classes raised while loading, comparing and
rendering line sequences. They carry enough context (offending path, option
name, partial data) for the command layer to produce diagnostics.

Exception Hierarchy
-------------------
- LineDiffError (base exception)

  - ValidationError (option/config validation)
    - UsageError (wrong operand count, conflicting operands)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permission denied)

  - DiffCancelledError (cooperative cancellation)

"""

from typing import Any


class LineDiffError(Exception):
    """Base exception class for all linediff-specific errors.

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


class ValidationError(LineDiffError):
    """Exception raised for invalid options or configuration values.

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


class UsageError(ValidationError):
    """Exception raised when the command is invoked with the wrong operands.

    Parameters
    ----------
    message : str
        Diagnostic text, without the ``diff:`` prefix
    operands : list[str], optional
        The operands that were supplied

    """

    def __init__(self, message: str, operands: list[str] | None = None):
        """Initialize the usage error."""
        super().__init__(message, parameter_name="operands", parameter_value=operands)
        self.operands = list(operands or [])


class FileError(LineDiffError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path (or operand) of the problematic input
    reason : str, optional
        Short reason suitable for ``diff: <path>: <reason>`` diagnostics.
        Defaults to ``message``.
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        reason: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the file error with path and reason."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path
        self.reason = reason or message


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, reason: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        reason = reason or "No such file or directory"
        super().__init__(f"{file_path}: {reason}", file_path=file_path, reason=reason, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when an input file exists but cannot be read."""

    def __init__(self, file_path: str, reason: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        reason = reason or "Permission denied"
        super().__init__(f"{file_path}: {reason}", file_path=file_path, reason=reason, original_error=original_error)


class DiffCancelledError(LineDiffError):
    """Exception raised when a cancellation token trips mid-operation.

    Parameters
    ----------
    message : str, optional
        Description of the stage that observed the cancellation
    partial : list, optional
        Data produced before the abort (lines read, lines normalized). The
        engine discards it by default; callers may salvage it.

    """

    def __init__(self, message: str = "operation cancelled", partial: list[Any] | None = None):
        """Initialize the cancellation error with any partial result."""
        super().__init__(message)
        self.partial = partial
