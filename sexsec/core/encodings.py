"""Binary-to-text codecs for encrypted string values."""

import base64
import binascii
from typing import Callable, Dict, Tuple

from utils.errors import DecryptionFailedError, InvalidArgumentError

DEFAULT_ENCODING = "hex"


def _latin1_encode(data: bytes) -> str:
    return data.decode("latin-1")


def _latin1_decode(text: str) -> bytes:
    return text.encode("latin-1")


def _base64_decode(text: str) -> bytes:
    return base64.b64decode(text, validate=True)


def _base64url_decode(text: str) -> bytes:
    # Unpadded input is accepted, like the hex and base64 forms
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


CODECS: Dict[str, Tuple[Callable[[bytes], str], Callable[[str], bytes]]] = {
    "hex": (bytes.hex, bytes.fromhex),
    "base64": (lambda data: base64.b64encode(data).decode("ascii"), _base64_decode),
    "base64url": (
        lambda data: base64.urlsafe_b64encode(data).decode("ascii").rstrip("="),
        _base64url_decode),
    "latin1": (_latin1_encode, _latin1_decode),
    "binary": (_latin1_encode, _latin1_decode),
}


def normalize_encoding(encoding: str) -> str:
    """
    Return the canonical codec name, falling back to hex when empty.

    Raises:
        InvalidArgumentError: If the codec is not supported
    """
    if not encoding:
        return DEFAULT_ENCODING
    name = encoding.strip().lower()
    if name not in CODECS:
        raise InvalidArgumentError(
            f"Unsupported encoding {encoding!r}. Supported: {', '.join(sorted(CODECS))}")
    return name


def encode_bytes(data: bytes, encoding: str) -> str:
    encoder, _ = CODECS[normalize_encoding(encoding)]
    return encoder(data)


def decode_text(text: str, encoding: str) -> bytes:
    """
    Turn an encoded ciphertext string back into raw bytes.

    Raises:
        DecryptionFailedError: If the text is not valid for the codec
    """
    _, decoder = CODECS[normalize_encoding(encoding)]
    try:
        return decoder(text)
    except (ValueError, binascii.Error, UnicodeEncodeError) as e:
        raise DecryptionFailedError(
            f"Value is not valid {encoding} text: {str(e)}") from e
