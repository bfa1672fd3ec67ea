"""
Centralized exceptions for SexSec.

This module re-exports all exceptions from their defining module to provide
a single import point for library users.
"""

from utils.errors import (
    SexSecError,
    ConfigurationError,
    PreconditionFailedError,
    InvalidArgumentError,
    ConstraintViolationError,
    NotFoundError,
    DecryptionFailedError,
    IOFailureError,
    SourceDeletionError,
)

# Re-export all exceptions
__all__ = [
    'SexSecError',
    'ConfigurationError',
    'PreconditionFailedError',
    'InvalidArgumentError',
    'ConstraintViolationError',
    'NotFoundError',
    'DecryptionFailedError',
    'IOFailureError',
    'SourceDeletionError',
]
