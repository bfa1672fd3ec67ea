"""
SexSec core: configuration state, key derivation, the cipher engine and
the directory walker.
"""

from .state import CipherSettings, ConfigurationState
from .key_derivation import derive_key
from .cipher_engine import (
    encrypt_value,
    decrypt_value,
    encrypt_stream,
    decrypt_stream,
    encrypt_file,
    decrypt_file,
)
from .tree_walker import encrypt_tree, decrypt_tree, iter_tree_files
from .filenames import ENCRYPTED_SUFFIX

__all__ = [
    "CipherSettings",
    "ConfigurationState",
    "derive_key",
    "encrypt_value",
    "decrypt_value",
    "encrypt_stream",
    "decrypt_stream",
    "encrypt_file",
    "decrypt_file",
    "encrypt_tree",
    "decrypt_tree",
    "iter_tree_files",
    "ENCRYPTED_SUFFIX",
]
