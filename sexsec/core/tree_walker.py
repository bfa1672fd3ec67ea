"""
Directory traversal.

Trees are walked depth-first with an explicit stack of directory listings,
one entry at a time and in listing order. Each directory is listed once,
when the walk reaches it, so files written during the walk are never
visited. Files are processed strictly one after another; the first failure
stops the walk and files handled before it keep their new state.
"""

import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

from sexsec.core import cipher_engine
from sexsec.core.filenames import is_encrypted_name
from sexsec.core.state import CipherSettings
from utils.error_handler import error_context
from utils.errors import IOFailureError, NotFoundError
from utils.logging_config import get_logger

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]
FileOperation = Callable[..., Path]


def _check_directory(dir_path: PathLike) -> Path:
    root = Path(dir_path)
    if not root.is_dir():
        raise NotFoundError(f"Directory does not exist: {root}", path=root)
    return root


def _list_directory(directory: str) -> List[os.DirEntry]:
    try:
        with os.scandir(directory) as entries:
            return list(entries)
    except OSError as e:
        raise IOFailureError(
            f"Failed to list {directory}: {str(e)}", path=directory, original_error=e) from e


def iter_tree_files(dir_path: PathLike) -> Iterator[Path]:
    """
    Yield every regular file below ``dir_path``, depth-first.

    Subdirectories are descended into at the point where they appear in
    their parent's listing. Symlinks and special files are skipped.

    Raises:
        NotFoundError: If ``dir_path`` is not an existing directory
        IOFailureError: If a directory cannot be listed
    """
    root = _check_directory(dir_path)
    stack = [iter(_list_directory(str(root)))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        try:
            if entry.is_symlink():
                LOGGER.debug("Skipping symlink %s", entry.path)
            elif entry.is_dir(follow_symlinks=False):
                stack.append(iter(_list_directory(entry.path)))
            elif entry.is_file(follow_symlinks=False):
                yield Path(entry.path)
            else:
                LOGGER.debug("Skipping special file %s", entry.path)
        except FileNotFoundError:
            # Removed between listing and visiting
            LOGGER.debug("Skipping vanished entry %s", entry.path)


def _apply(
        operation: FileOperation,
        action: str,
        files: Iterator[Path],
        settings: CipherSettings,
        force: bool,
        chunk_size: Optional[int]) -> List[Path]:
    outputs: List[Path] = []
    for path in files:
        with error_context(f"{action} {path} ({len(outputs)} file(s) done)"):
            outputs.append(operation(path, settings, force=force, chunk_size=chunk_size))
    return outputs


def encrypt_tree(
        dir_path: PathLike,
        settings: CipherSettings,
        force: bool = False,
        chunk_size: Optional[int] = None) -> List[Path]:
    """
    Recursively encrypt every file under a directory.

    Args:
        dir_path: The directory to encrypt
        settings: The cipher configuration
        force: Delete each original once its encrypted copy is written
        chunk_size: Read buffer size in bytes (default from config)

    Returns:
        List[Path]: The encrypted files, in processing order

    Raises:
        NotFoundError: If ``dir_path`` is not an existing directory
        SexSecError: The first error raised by any file; earlier files stay
            encrypted
    """
    cipher_engine.require_key(settings)
    root = _check_directory(dir_path)
    outputs = _apply(
        cipher_engine.encrypt_file, "encrypting", iter_tree_files(root),
        settings, force, chunk_size)
    LOGGER.info("Encrypted %d file(s) under %s", len(outputs), root)
    return outputs


def decrypt_tree(
        dir_path: PathLike,
        settings: CipherSettings,
        force: bool = False,
        chunk_size: Optional[int] = None) -> List[Path]:
    """
    Recursively decrypt every ``.sex`` file under a directory.

    Files without the extension are left alone.

    Args:
        dir_path: The directory to decrypt
        settings: The cipher configuration
        force: Delete each encrypted file once its plaintext is written
        chunk_size: Read buffer size in bytes (default from config)

    Returns:
        List[Path]: The decrypted files, in processing order

    Raises:
        NotFoundError: If ``dir_path`` is not an existing directory
        SexSecError: The first error raised by any file; earlier files stay
            decrypted
    """
    cipher_engine.require_key(settings)
    root = _check_directory(dir_path)
    files = (path for path in iter_tree_files(root) if is_encrypted_name(path))
    outputs = _apply(
        cipher_engine.decrypt_file, "decrypting", files, settings, force, chunk_size)
    LOGGER.info("Decrypted %d file(s) under %s", len(outputs), root)
    return outputs
