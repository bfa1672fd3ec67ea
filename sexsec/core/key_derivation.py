'''
Key derivation.

Passphrases are hashed with unsalted SHA-256 so the same passphrase rebuilds
the same key across runs. The digest is truncated to the key size of the
configured cipher.
'''

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend

from utils.errors import InvalidArgumentError

DIGEST_SIZE = hashes.SHA256.digest_size


def derive_key(passphrase: str, key_size: int = DIGEST_SIZE) -> bytes:
    """
    Derive fixed-length key material from a passphrase.

    Args:
        passphrase: The secret text
        key_size: Number of key bytes required by the cipher

    Returns:
        bytes: The derived key

    Raises:
        InvalidArgumentError: If the passphrase is empty or the key size
            cannot be served by a single SHA-256 digest
    """
    if not passphrase:
        raise InvalidArgumentError("Key is required")
    if not 0 < key_size <= DIGEST_SIZE:
        raise InvalidArgumentError(
            f"Key size must be between 1 and {DIGEST_SIZE} bytes, got {key_size}")

    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(passphrase.encode('utf-8'))
    return digest.finalize()[:key_size]
