"""
SexSec - symmetric encryption for strings, files and directory trees

Strings are encrypted deterministically with a fixed IV; files carry a fresh
random IV in front of their ciphertext and are written as ``<name>.sex``.
Directory trees are processed depth-first, one file at a time.

Example:
    import sexsec

    sexsec.change_key('mySecretPassword')
    token = sexsec.encrypt_value('Hello World')
    assert sexsec.decrypt_value(token) == 'Hello World'

    sexsec.encrypt_file('/path/to/file.txt', force=True)
    sexsec.decrypt_dir('/path/to/directory')
"""

__version__ = "1.0.0"

# Process-wide API
from .api import (
    STATE as state,
    change_key,
    change_encoding,
    change_iv_length,
    encrypt_value,
    decrypt_value,
    encrypt_file,
    decrypt_file,
    encrypt_dir,
    decrypt_dir,
)

# Explicit-settings API
from .core import CipherSettings, ConfigurationState, ENCRYPTED_SUFFIX

# Configuration and exceptions
from .config import config
from .exceptions import (
    SexSecError,
    PreconditionFailedError,
    InvalidArgumentError,
    ConstraintViolationError,
    NotFoundError,
    DecryptionFailedError,
    IOFailureError,
    SourceDeletionError,
)

__all__ = [
    # Process-wide API
    "state",
    "change_key",
    "change_encoding",
    "change_iv_length",
    "encrypt_value",
    "decrypt_value",
    "encrypt_file",
    "decrypt_file",
    "encrypt_dir",
    "decrypt_dir",

    # Explicit-settings API
    "CipherSettings",
    "ConfigurationState",
    "ENCRYPTED_SUFFIX",

    # Configuration and exceptions
    "config",
    "SexSecError",
    "PreconditionFailedError",
    "InvalidArgumentError",
    "ConstraintViolationError",
    "NotFoundError",
    "DecryptionFailedError",
    "IOFailureError",
    "SourceDeletionError",
]
