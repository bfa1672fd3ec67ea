"""
Derived paths for encrypted files.

Encryption appends the reserved ``.sex`` extension to the file name and
decryption removes it again. Only the trailing extension is ever removed,
never the first occurrence of ``.sex`` in the name: ``x.sex.y.sex`` decrypts
to ``x.sex.y``, not ``x.y.sex``. Names that contain ``.sex`` elsewhere
(``notes.sex.txt``) therefore round-trip unchanged.
"""

from pathlib import Path
from typing import Union

from utils.errors import InvalidArgumentError

ENCRYPTED_SUFFIX = ".sex"


def is_encrypted_name(path: Union[str, Path]) -> bool:
    """Whether ``path`` carries the reserved extension on a non-empty stem."""
    name = Path(path).name
    return name.endswith(ENCRYPTED_SUFFIX) and len(name) > len(ENCRYPTED_SUFFIX)


def encrypted_path(path: Union[str, Path]) -> Path:
    """Return the output path for encrypting ``path``."""
    path = Path(path)
    return path.with_name(path.name + ENCRYPTED_SUFFIX)


def decrypted_path(path: Union[str, Path]) -> Path:
    """
    Return the output path for decrypting ``path``.

    Raises:
        InvalidArgumentError: If the name does not end with the reserved
            extension, which would make the output collide with the input
    """
    path = Path(path)
    if not is_encrypted_name(path):
        raise InvalidArgumentError(
            f"Cannot derive a decrypted name for {path}: expected a name ending in {ENCRYPTED_SUFFIX}")
    return path.with_name(path.name[:-len(ENCRYPTED_SUFFIX)])
