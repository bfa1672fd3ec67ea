"""Tests for SexSec exception classes."""
from pathlib import Path

from sexsec.exceptions import (
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


def test_sexsec_error():
    """Test SexSecError exception."""
    error = SexSecError("error")
    assert str(error) == "error"
    assert isinstance(error, Exception)


def test_configuration_error():
    """Test ConfigurationError exception."""
    error = ConfigurationError("Missing configuration")
    assert str(error) == "Missing configuration"
    assert isinstance(error, SexSecError)


def test_precondition_failed_error():
    """Test PreconditionFailedError exception."""
    error = PreconditionFailedError("Key is required")
    assert str(error) == "Key is required"
    assert isinstance(error, SexSecError)


def test_invalid_argument_error():
    """Test InvalidArgumentError exception."""
    error = InvalidArgumentError("IV length is required")
    assert str(error) == "IV length is required"
    assert isinstance(error, SexSecError)


def test_constraint_violation_error():
    """Test ConstraintViolationError exception."""
    error = ConstraintViolationError("IV length must be at most 16")
    assert "at most 16" in str(error)
    assert isinstance(error, SexSecError)


def test_decryption_failed_error():
    """Test DecryptionFailedError exception."""
    error = DecryptionFailedError("Decryption failed: bad padding")
    assert str(error) == "Decryption failed: bad padding"
    assert isinstance(error, SexSecError)


def test_not_found_error() -> None:
    """Test NotFoundError keeps the missing path."""
    error = NotFoundError("File does not exist: /tmp/x", path=Path("/tmp/x"))
    assert str(error) == "File does not exist: /tmp/x"
    assert error.path == Path("/tmp/x")
    assert NotFoundError("no path").path is None


def test_io_failure_error() -> None:
    """Test IOFailureError keeps the path and the original error."""
    cause = OSError("disk full")
    error = IOFailureError("Failed to write", path="/tmp/x", original_error=cause)
    assert error.path == "/tmp/x"
    assert error.original_error is cause
    assert isinstance(error, SexSecError)


def test_source_deletion_error() -> None:
    """Test SourceDeletionError is an IOFailureError that names the output."""
    error = SourceDeletionError(
        "Failed to delete source", path="/tmp/x", output_path="/tmp/x.sex")
    assert isinstance(error, IOFailureError)
    assert error.path == "/tmp/x"
    assert error.output_path == "/tmp/x.sex"
    assert error.original_error is None
