"""
Process-wide SexSec API.

Module-level functions bound to a single default ConfigurationState, for
callers that configure the key once and then encrypt values, files and
directories without passing settings around. Each call takes a snapshot of
the state when it starts.
"""

from pathlib import Path
from typing import List, Optional, Union

from sexsec.core import cipher_engine, tree_walker
from sexsec.core.state import ConfigurationState
from utils.error_handler import handle_errors
from utils.errors import DecryptionFailedError, IOFailureError

PathLike = Union[str, Path]

STATE = ConfigurationState()


def change_key(passphrase: str) -> bytes:
    """Derive the key from ``passphrase`` and make it the active key."""
    return STATE.set_key(passphrase)


def change_encoding(encoding: Optional[str]) -> None:
    """Change the text encoding of encrypted values (hex when empty)."""
    STATE.set_encoding(encoding)


def change_iv_length(iv_length: int) -> None:
    """Change the IV length used by subsequent operations."""
    STATE.set_iv_length(iv_length)


def encrypt_value(text: str) -> str:
    return cipher_engine.encrypt_value(text, STATE.snapshot())


def decrypt_value(token: str) -> str:
    return cipher_engine.decrypt_value(token, STATE.snapshot())


@handle_errors(error_types=(IOFailureError, DecryptionFailedError))
def encrypt_file(path: PathLike, force: bool = False) -> Path:
    return cipher_engine.encrypt_file(path, STATE.snapshot(), force=force)


@handle_errors(error_types=(IOFailureError, DecryptionFailedError))
def decrypt_file(path: PathLike, force: bool = False) -> Path:
    return cipher_engine.decrypt_file(path, STATE.snapshot(), force=force)


def encrypt_dir(dir_path: PathLike, force: bool = False) -> List[Path]:
    """Recursively encrypt all files under ``dir_path``."""
    return tree_walker.encrypt_tree(dir_path, STATE.snapshot(), force=force)


def decrypt_dir(dir_path: PathLike, force: bool = False) -> List[Path]:
    """Recursively decrypt all ``.sex`` files under ``dir_path``."""
    return tree_walker.decrypt_tree(dir_path, STATE.snapshot(), force=force)
