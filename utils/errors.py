"""
SexSec Error Classes (General/Shared)

This module defines the custom exceptions used throughout the SexSec library.
"""

from pathlib import Path
from typing import Optional, Union


class SexSecError(Exception):
    """Base exception for SexSec errors."""


class ConfigurationError(SexSecError):
    """Raised when there's an application configuration error."""


class PreconditionFailedError(SexSecError):
    """Raised when a cipher operation runs before a key was configured."""


class InvalidArgumentError(SexSecError):
    """Raised when a required argument is missing or unusable."""


class ConstraintViolationError(SexSecError):
    """Raised when a value breaks a hard constraint of the cipher family."""


class NotFoundError(SexSecError):
    """Raised when a file or directory target does not exist."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class DecryptionFailedError(SexSecError):
    """Raised when ciphertext cannot be decoded, decrypted or unpadded."""


class IOFailureError(SexSecError):
    """Raised when an underlying read, write, list or delete fails."""

    def __init__(
            self,
            message: str,
            path: Optional[Union[str, Path]] = None,
            original_error: Optional[Exception] = None):
        super().__init__(message)
        self.path = path
        self.original_error = original_error


class SourceDeletionError(IOFailureError):
    """Raised when the transform succeeded but the source could not be removed.

    Both the source and the output are still present on disk.
    """

    def __init__(
            self,
            message: str,
            path: Optional[Union[str, Path]] = None,
            output_path: Optional[Union[str, Path]] = None,
            original_error: Optional[Exception] = None):
        super().__init__(message, path=path, original_error=original_error)
        self.output_path = output_path
