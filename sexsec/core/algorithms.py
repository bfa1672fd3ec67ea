"""
Cipher registry.

Maps the algorithm names accepted by the configuration (``aes-256-cbc`` and
friends) onto the block cipher classes of the cryptography library. Camellia
is taken from the decrepit namespace, where cryptography keeps legacy
ciphers.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from cryptography.hazmat.decrepit.ciphers.algorithms import Camellia
from cryptography.hazmat.primitives.ciphers import CipherAlgorithm, algorithms

from utils.errors import InvalidArgumentError

# Hard limit of the AES family on IV length, in bytes
AES_MAX_IV_LENGTH = 16


@dataclass(frozen=True)
class CipherSpec:
    """Static description of a supported block cipher in CBC mode."""
    name: str
    family: str
    factory: Callable[[bytes], CipherAlgorithm]
    key_size: int  # bytes
    block_size: int  # bits

    @property
    def is_aes(self) -> bool:
        return self.family == "aes"


CIPHERS: Dict[str, CipherSpec] = {
    spec.name: spec for spec in (
        CipherSpec("aes-128-cbc", "aes", algorithms.AES, 16, algorithms.AES.block_size),
        CipherSpec("aes-192-cbc", "aes", algorithms.AES, 24, algorithms.AES.block_size),
        CipherSpec("aes-256-cbc", "aes", algorithms.AES, 32, algorithms.AES.block_size),
        CipherSpec("camellia-128-cbc", "camellia", Camellia, 16, Camellia.block_size),
        CipherSpec("camellia-192-cbc", "camellia", Camellia, 24, Camellia.block_size),
        CipherSpec("camellia-256-cbc", "camellia", Camellia, 32, Camellia.block_size),
    )
}


def resolve_cipher(name: str) -> CipherSpec:
    """
    Look up a cipher by its configuration name.

    Args:
        name: Algorithm name, case-insensitive (e.g. ``aes-256-cbc``)

    Returns:
        CipherSpec: The matching registry entry

    Raises:
        InvalidArgumentError: If the algorithm is not supported
    """
    spec = CIPHERS.get((name or "").strip().lower())
    if spec is None:
        raise InvalidArgumentError(
            f"Unsupported algorithm {name!r}. Supported: {', '.join(sorted(CIPHERS))}")
    return spec
