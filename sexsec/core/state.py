"""
Cipher configuration state.

ConfigurationState is the mutable holder the setters act on. Every engine
and traversal call works on a CipherSettings snapshot instead, so an
operation in flight never sees a configuration change. Callers that mutate
a shared ConfigurationState while operations run only affect later
snapshots; there is no locking.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Optional

from sexsec.config import config
from sexsec.core.algorithms import AES_MAX_IV_LENGTH, resolve_cipher
from sexsec.core.encodings import normalize_encoding
from sexsec.core.key_derivation import derive_key
from utils.errors import ConstraintViolationError, InvalidArgumentError
from utils.logging_config import get_logger

LOGGER = get_logger(__name__)


def validate_iv_length(iv_length: Optional[int], algorithm: str) -> int:
    """
    Check an IV length against the cipher family.

    Raises:
        InvalidArgumentError: If the length is absent or not positive
        ConstraintViolationError: If the length exceeds 16 for an AES cipher
    """
    if not iv_length or iv_length < 0:
        raise InvalidArgumentError("IV length is required")
    if iv_length > AES_MAX_IV_LENGTH and resolve_cipher(algorithm).is_aes:
        raise ConstraintViolationError(
            f"IV length must be at most {AES_MAX_IV_LENGTH} for AES algorithms, got {iv_length}")
    return iv_length


@dataclass(frozen=True)
class CipherSettings:
    """Immutable view of a cipher configuration, passed into every operation."""
    algorithm: str = "aes-256-cbc"
    encoding: str = "hex"
    key: Optional[bytes] = field(default=None, repr=False)
    iv_length: int = 16

    @classmethod
    def create(
            cls,
            passphrase: Optional[str] = None,
            algorithm: Optional[str] = None,
            encoding: Optional[str] = None,
            iv_length: Optional[int] = None) -> "CipherSettings":
        """
        Build validated settings without going through a ConfigurationState.

        Unspecified values fall back to the application defaults. The key is
        left unset when no passphrase is given.
        """
        algorithm = resolve_cipher(algorithm or config.cryptography.algorithm).name
        iv_length = validate_iv_length(
            iv_length if iv_length is not None else config.cryptography.iv_length,
            algorithm)
        key = None
        if passphrase is not None:
            key = derive_key(passphrase, resolve_cipher(algorithm).key_size)
        return cls(
            algorithm=algorithm,
            encoding=normalize_encoding(encoding or config.cryptography.encoding),
            key=key,
            iv_length=iv_length,
        )

    def with_key(self, passphrase: str) -> "CipherSettings":
        """Return a copy keyed from ``passphrase``."""
        return dataclasses.replace(
            self, key=derive_key(passphrase, resolve_cipher(self.algorithm).key_size))

    @property
    def has_key(self) -> bool:
        return self.key is not None


class ConfigurationState:
    """
    Mutable cipher configuration, changed only through its setters.

    Attributes:
        algorithm: Name of the symmetric cipher mode
        encoding: Text codec used for encrypted string values
        key: Derived key bytes, or None until set_key is called
        iv_length: Initialization vector length in bytes
    """

    def __init__(
            self,
            algorithm: Optional[str] = None,
            encoding: Optional[str] = None,
            iv_length: Optional[int] = None) -> None:
        self._defaults = (algorithm, encoding, iv_length)
        self._settings = CipherSettings.create(
            algorithm=algorithm, encoding=encoding, iv_length=iv_length)

    @property
    def algorithm(self) -> str:
        return self._settings.algorithm

    @property
    def encoding(self) -> str:
        return self._settings.encoding

    @property
    def key(self) -> Optional[bytes]:
        return self._settings.key

    @property
    def iv_length(self) -> int:
        return self._settings.iv_length

    def set_key(self, passphrase: str) -> bytes:
        """
        Derive and store the key for ``passphrase``.

        Returns:
            bytes: The derived key

        Raises:
            InvalidArgumentError: If the passphrase is empty
        """
        self._settings = self._settings.with_key(passphrase)
        LOGGER.debug("Key updated for %s", self.algorithm)
        return self._settings.key

    def set_encoding(self, encoding: Optional[str]) -> None:
        """Replace the output encoding; empty values fall back to hex."""
        self._settings = dataclasses.replace(
            self._settings, encoding=normalize_encoding(encoding))
        LOGGER.debug("Encoding set to %s", self.encoding)

    def set_iv_length(self, iv_length: Optional[int]) -> None:
        """
        Replace the IV length.

        Raises:
            InvalidArgumentError: If the length is absent or zero
            ConstraintViolationError: If the length exceeds the AES limit
        """
        self._settings = dataclasses.replace(
            self._settings,
            iv_length=validate_iv_length(iv_length, self.algorithm))
        LOGGER.debug("IV length set to %d", self.iv_length)

    def snapshot(self) -> CipherSettings:
        """Return the current configuration as an immutable value."""
        return self._settings

    def reset(self) -> None:
        """Restore the construction-time defaults and clear the key."""
        algorithm, encoding, iv_length = self._defaults
        self._settings = CipherSettings.create(
            algorithm=algorithm, encoding=encoding, iv_length=iv_length)

    def __repr__(self) -> str:
        return (f"ConfigurationState(algorithm={self.algorithm!r}, encoding={self.encoding!r}, "
                f"iv_length={self.iv_length}, key_set={self.key is not None})")
