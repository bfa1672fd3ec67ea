'''
Cipher Engine

This module builds the encrypt/decrypt operations of SexSec on top of the
block ciphers of the cryptography library, in CBC mode with PKCS7 padding.

There are two distinct paths with different security properties:

* String mode (encrypt_value/decrypt_value) uses an all-zero IV. It is
  deterministic: the same plaintext always yields the same token, so equal
  values can be compared in encrypted form. Repeated plaintexts are
  therefore recognizable and this path must not be used where
  confidentiality of repeated values matters.
* File mode (encrypt_file/decrypt_file) draws a fresh random IV per call and
  stores it in front of the ciphertext: ``[IV][ciphertext]``, with no header
  and no authentication tag.
'''

import os
import stat
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

from cryptography.hazmat.primitives.ciphers import Cipher, modes
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.backends import default_backend

from sexsec.config import config
from sexsec.core.algorithms import resolve_cipher
from sexsec.core.encodings import decode_text, encode_bytes
from sexsec.core.filenames import decrypted_path, encrypted_path
from sexsec.core.state import CipherSettings
from utils.errors import (
    ConstraintViolationError,
    DecryptionFailedError,
    IOFailureError,
    NotFoundError,
    PreconditionFailedError,
    SourceDeletionError,
)
from utils.logging_config import get_logger

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]


def require_key(settings: CipherSettings) -> bytes:
    """Return the configured key or raise PreconditionFailedError."""
    if settings.key is None:
        raise PreconditionFailedError("Key is required")
    return settings.key


def build_cipher(settings: CipherSettings, initialization_vector: bytes) -> Cipher:
    """
    Create a cipher bound to the configured algorithm, key and an IV.

    Args:
        settings: The cipher configuration
        initialization_vector: IV bytes, normally ``settings.iv_length`` long

    Returns:
        Cipher: A cipher object that hands out encryptor/decryptor contexts

    Raises:
        PreconditionFailedError: If no key is configured
        ConstraintViolationError: If the cipher rejects the key or IV size
    """
    key = require_key(settings)
    spec = resolve_cipher(settings.algorithm)
    try:
        return Cipher(
            spec.factory(key),
            modes.CBC(initialization_vector),
            backend=default_backend()
        )
    except ValueError as e:
        raise ConstraintViolationError(
            f"Cannot build {spec.name} cipher with a {len(key)}-byte key and "
            f"{len(initialization_vector)}-byte IV: {str(e)}") from e


def _block_size(settings: CipherSettings) -> int:
    return resolve_cipher(settings.algorithm).block_size


def encrypt_value(text: str, settings: CipherSettings) -> str:
    """
    Encrypt a string with the fixed all-zero IV.

    Args:
        text: UTF-8 text to encrypt
        settings: The cipher configuration

    Returns:
        str: The ciphertext rendered in ``settings.encoding``

    Raises:
        PreconditionFailedError: If no key is configured
    """
    cipher = build_cipher(settings, bytes(settings.iv_length))
    encryptor = cipher.encryptor()

    padder = padding.PKCS7(_block_size(settings)).padder()
    padded_data = padder.update(text.encode('utf-8')) + padder.finalize()

    encrypted_data = encryptor.update(padded_data) + encryptor.finalize()
    return encode_bytes(encrypted_data, settings.encoding)


def decrypt_value(token: str, settings: CipherSettings) -> str:
    """
    Decrypt a string produced by encrypt_value.

    Args:
        token: Ciphertext in ``settings.encoding``
        settings: The cipher configuration

    Returns:
        str: The recovered UTF-8 text

    Raises:
        PreconditionFailedError: If no key is configured
        DecryptionFailedError: If the token is malformed, was encrypted with
            another key or configuration, or is corrupted
    """
    cipher = build_cipher(settings, bytes(settings.iv_length))
    encrypted_data = decode_text(token, settings.encoding)

    try:
        decryptor = cipher.decryptor()
        padded_data = decryptor.update(encrypted_data) + decryptor.finalize()
        unpadder = padding.PKCS7(_block_size(settings)).unpadder()
        data = unpadder.update(padded_data) + unpadder.finalize()
        return data.decode('utf-8')
    except (ValueError, UnicodeDecodeError) as e:
        raise DecryptionFailedError(f"Decryption failed: {str(e)}") from e


def _read_chunks(source: BinaryIO, chunk_size: Optional[int]) -> Iterator[bytes]:
    chunk_size = chunk_size or config.cryptography.chunk_size
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            return
        yield chunk


def encrypt_stream(
        source: BinaryIO,
        destination: BinaryIO,
        settings: CipherSettings,
        chunk_size: Optional[int] = None) -> int:
    """
    Encrypt ``source`` into ``destination`` as ``[IV][ciphertext]``.

    A fresh random IV is drawn for every call. The source is read in chunks
    so files of any size stream through in constant memory.

    Returns:
        int: Number of bytes written to ``destination``

    Raises:
        PreconditionFailedError: If no key is configured
        ConstraintViolationError: If the cipher rejects the IV length
    """
    initialization_vector = os.urandom(settings.iv_length)
    encryptor = build_cipher(settings, initialization_vector).encryptor()
    padder = padding.PKCS7(_block_size(settings)).padder()

    destination.write(initialization_vector)
    written = len(initialization_vector)
    for chunk in _read_chunks(source, chunk_size):
        block = encryptor.update(padder.update(chunk))
        destination.write(block)
        written += len(block)

    tail = encryptor.update(padder.finalize()) + encryptor.finalize()
    destination.write(tail)
    return written + len(tail)


def decrypt_stream(
        source: BinaryIO,
        destination: BinaryIO,
        settings: CipherSettings,
        chunk_size: Optional[int] = None) -> int:
    """
    Decrypt ``[IV][ciphertext]`` from ``source`` into ``destination``.

    The first ``settings.iv_length`` bytes are consumed as the IV before any
    ciphertext reaches the decryptor.

    Returns:
        int: Number of plaintext bytes written

    Raises:
        PreconditionFailedError: If no key is configured
        DecryptionFailedError: If the data is truncated, corrupted or was
            encrypted under another key
    """
    require_key(settings)
    initialization_vector = source.read(settings.iv_length)
    if len(initialization_vector) < settings.iv_length:
        raise DecryptionFailedError(
            f"Encrypted data is shorter than the {settings.iv_length}-byte IV")

    decryptor = build_cipher(settings, initialization_vector).decryptor()
    unpadder = padding.PKCS7(_block_size(settings)).unpadder()

    written = 0
    for chunk in _read_chunks(source, chunk_size):
        block = unpadder.update(decryptor.update(chunk))
        destination.write(block)
        written += len(block)

    try:
        tail = unpadder.update(decryptor.finalize()) + unpadder.finalize()
    except ValueError as e:
        raise DecryptionFailedError(f"Decryption failed: {str(e)}") from e
    destination.write(tail)
    return written + len(tail)


@contextmanager
def _atomic_output(target: Path, mode: int) -> Iterator[BinaryIO]:
    """
    Yield a temporary sibling of ``target`` that replaces it on success.

    The data is flushed and fsynced before the move, so ``target`` either
    holds the complete output or is left as it was. The temporary file is
    created owner-only, so ``mode`` is applied before the move. On failure
    the temporary file is removed.
    """
    handle = tempfile.NamedTemporaryFile(
        mode='wb', dir=target.parent, prefix=f".{target.name}.", suffix=".part", delete=False)
    try:
        with handle:
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(handle.name, mode)
        os.replace(handle.name, target)
    except BaseException:
        try:
            os.unlink(handle.name)
        except FileNotFoundError:
            pass
        raise


def _permission_bits(source: Path) -> int:
    # Outputs carry the permissions of the file they were derived from
    return stat.S_IMODE(source.stat().st_mode)


def _check_source(path: PathLike) -> Path:
    source = Path(path)
    if not source.is_file():
        raise NotFoundError(f"File does not exist: {source}", path=source)
    return source


def _remove_source(source: Path, output: Path) -> None:
    try:
        source.unlink()
    except OSError as e:
        raise SourceDeletionError(
            f"{output} was written but {source} could not be removed: {str(e)}",
            path=source,
            output_path=output,
            original_error=e) from e


def encrypt_file(
        path: PathLike,
        settings: CipherSettings,
        force: bool = False,
        chunk_size: Optional[int] = None) -> Path:
    """
    Encrypt a file into ``<path>.sex``.

    Args:
        path: The file to encrypt
        settings: The cipher configuration
        force: Delete the source once the output is completely written
        chunk_size: Read buffer size in bytes (default from config)

    Returns:
        Path: The path of the encrypted file

    Raises:
        PreconditionFailedError: If no key is configured
        NotFoundError: If ``path`` is not an existing regular file
        IOFailureError: If reading or writing fails; the source is untouched
        SourceDeletionError: If ``force`` is set and the source could not be
            removed; the encrypted file remains on disk
    """
    require_key(settings)
    source = _check_source(path)
    output = encrypted_path(source)

    try:
        with open(source, 'rb') as reader, _atomic_output(output, _permission_bits(source)) as writer:
            size = encrypt_stream(reader, writer, settings, chunk_size)
    except OSError as e:
        raise IOFailureError(
            f"Failed to encrypt {source}: {str(e)}", path=source, original_error=e) from e

    LOGGER.debug("Encrypted %s -> %s (%d bytes)", source, output, size)
    if force:
        _remove_source(source, output)
        LOGGER.debug("Removed source %s", source)
    return output


def decrypt_file(
        path: PathLike,
        settings: CipherSettings,
        force: bool = False,
        chunk_size: Optional[int] = None) -> Path:
    """
    Decrypt a ``.sex`` file next to itself, without the extension.

    Args:
        path: The encrypted file
        settings: The cipher configuration
        force: Delete the encrypted file once the plaintext is written
        chunk_size: Read buffer size in bytes (default from config)

    Returns:
        Path: The path of the decrypted file

    Raises:
        PreconditionFailedError: If no key is configured
        NotFoundError: If ``path`` is not an existing regular file
        InvalidArgumentError: If the name does not end with ``.sex``
        DecryptionFailedError: If the content cannot be decrypted; no output
            is left behind
        IOFailureError: If reading or writing fails
        SourceDeletionError: If ``force`` is set and the encrypted file could
            not be removed; the decrypted file remains on disk
    """
    require_key(settings)
    source = _check_source(path)
    output = decrypted_path(source)

    try:
        with open(source, 'rb') as reader, _atomic_output(output, _permission_bits(source)) as writer:
            size = decrypt_stream(reader, writer, settings, chunk_size)
    except OSError as e:
        raise IOFailureError(
            f"Failed to decrypt {source}: {str(e)}", path=source, original_error=e) from e

    LOGGER.debug("Decrypted %s -> %s (%d bytes)", source, output, size)
    if force:
        _remove_source(source, output)
        LOGGER.debug("Removed source %s", source)
    return output
