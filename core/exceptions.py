"""
Custom exception classes for the codebundle CLI.

This module defines application-specific exceptions that are raised during
file discovery, bundle assembly and response-file handling. Each exception
keeps the path it is about and the underlying exception, so the entry point
can present a precise message to the user.
"""

from pathlib import Path
from typing import Optional


class FileIOError(Exception):
    """
    Base exception for file read/write failures.

    Attributes:
        message: A human-readable error message describing what went wrong.
        file_path: The path of the file involved, if known.
        original_exception: The underlying exception that caused this error, if any.
    """

    default_message = "A file I/O error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.file_path = file_path
        self.original_exception = original_exception


class InvalidFilePathError(FileIOError):
    """
    Raised when a path cannot be used for output.

    Typically the parent directory of the output file does not exist or is
    not writable.
    """

    default_message = "Invalid file path provided"


class FileReadError(FileIOError):
    """Raised when a source file cannot be read."""

    default_message = "Failed to read file"


class FileWriteError(FileIOError):
    """Raised when the bundle or a response file cannot be written."""

    default_message = "Failed to write to file"


class DiscoveryError(Exception):
    """
    Raised when the scan root cannot be enumerated.

    This covers a missing root directory as well as permission errors hit
    while walking sub-directories.

    Attributes:
        message: A human-readable error message.
        root: The directory whose enumeration failed.
        original_exception: The underlying OSError, if any.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        root: Optional[Path] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or "Failed to enumerate source files"
        super().__init__(self.message)
        self.root = root
        self.original_exception = original_exception


class ResponseFileError(FileIOError):
    """Raised when an @-referenced response file cannot be loaded."""

    default_message = "Failed to load response file"
