"""
Awaitable file and directory operations.

Each single-file step runs in a worker thread via asyncio.to_thread and is
awaited before the walk moves on, so the event loop stays responsive while
at most one file operation is in flight per call.
"""

import asyncio
from pathlib import Path
from typing import Iterator, List, Optional

from sexsec.core import cipher_engine, tree_walker
from sexsec.core.filenames import is_encrypted_name
from sexsec.core.state import CipherSettings
from sexsec.core.tree_walker import PathLike
from utils.error_handler import handle_async_errors
from utils.errors import DecryptionFailedError, IOFailureError
from utils.logging_config import get_logger

LOGGER = get_logger(__name__)


@handle_async_errors(error_types=(IOFailureError, DecryptionFailedError))
async def encrypt_file(
        path: PathLike,
        settings: CipherSettings,
        force: bool = False,
        chunk_size: Optional[int] = None) -> Path:
    """Awaitable form of cipher_engine.encrypt_file."""
    return await asyncio.to_thread(
        cipher_engine.encrypt_file, path, settings, force=force, chunk_size=chunk_size)


@handle_async_errors(error_types=(IOFailureError, DecryptionFailedError))
async def decrypt_file(
        path: PathLike,
        settings: CipherSettings,
        force: bool = False,
        chunk_size: Optional[int] = None) -> Path:
    """Awaitable form of cipher_engine.decrypt_file."""
    return await asyncio.to_thread(
        cipher_engine.decrypt_file, path, settings, force=force, chunk_size=chunk_size)


async def _next_file(files: Iterator[Path]) -> Optional[Path]:
    # Directory listings happen inside next(), so they run off the loop too
    return await asyncio.to_thread(next, files, None)


async def encrypt_tree(
        dir_path: PathLike,
        settings: CipherSettings,
        force: bool = False,
        chunk_size: Optional[int] = None) -> List[Path]:
    """Awaitable form of tree_walker.encrypt_tree, with the same ordering."""
    cipher_engine.require_key(settings)
    files = tree_walker.iter_tree_files(dir_path)
    outputs: List[Path] = []
    while True:
        path = await _next_file(files)
        if path is None:
            break
        outputs.append(await encrypt_file(path, settings, force=force, chunk_size=chunk_size))
    LOGGER.info("Encrypted %d file(s) under %s", len(outputs), dir_path)
    return outputs


async def decrypt_tree(
        dir_path: PathLike,
        settings: CipherSettings,
        force: bool = False,
        chunk_size: Optional[int] = None) -> List[Path]:
    """Awaitable form of tree_walker.decrypt_tree, with the same ordering."""
    cipher_engine.require_key(settings)
    files = tree_walker.iter_tree_files(dir_path)
    outputs: List[Path] = []
    while True:
        path = await _next_file(files)
        if path is None:
            break
        if is_encrypted_name(path):
            outputs.append(await decrypt_file(path, settings, force=force, chunk_size=chunk_size))
    LOGGER.info("Decrypted %d file(s) under %s", len(outputs), dir_path)
    return outputs
