"""Unit tests for value codecs and derived file names."""
from pathlib import Path

import pytest

from sexsec.core.encodings import decode_text, encode_bytes, normalize_encoding
from sexsec.core.filenames import (
    ENCRYPTED_SUFFIX,
    decrypted_path,
    encrypted_path,
    is_encrypted_name,
)
from utils.errors import DecryptionFailedError, InvalidArgumentError

SAMPLE = bytes(range(0, 256, 7))


@pytest.mark.parametrize("encoding", ["hex", "base64", "base64url", "latin1", "binary"])
def test_codecs_restore_bytes(encoding: str) -> None:
    """Test that every codec restores the original bytes"""
    assert decode_text(encode_bytes(SAMPLE, encoding), encoding) == SAMPLE


def test_hex_is_lowercase() -> None:
    """Test the hex rendering"""
    assert encode_bytes(b"\xab\x01", "hex") == "ab01"


def test_base64url_has_no_padding() -> None:
    """Test that base64url output is URL safe and unpadded"""
    encoded = encode_bytes(b"\xfb\xff", "base64url")
    assert encoded == "-_8"
    assert decode_text(encoded, "base64url") == b"\xfb\xff"


def test_normalize_encoding() -> None:
    """Test codec name normalization"""
    assert normalize_encoding("Base64") == "base64"
    assert normalize_encoding("") == "hex"
    with pytest.raises(InvalidArgumentError):
        normalize_encoding("utf-16")


@pytest.mark.parametrize("encoding,text", [
    ("hex", "not hex"),
    ("hex", "abc"),
    ("base64", "@@@@"),
    ("latin1", "你好"),
])
def test_decode_invalid_text(encoding: str, text: str) -> None:
    """Test that malformed text surfaces as a decryption failure"""
    with pytest.raises(DecryptionFailedError) as exc_info:
        decode_text(text, encoding)
    assert f"not valid {encoding}" in str(exc_info.value)


def test_encrypted_path_appends_suffix() -> None:
    """Test that encryption appends the reserved extension"""
    assert encrypted_path("/data/report.pdf") == Path("/data/report.pdf" + ENCRYPTED_SUFFIX)


def test_decrypted_path_strips_trailing_suffix() -> None:
    """Test that decryption removes only the trailing extension"""
    assert decrypted_path("/data/report.pdf.sex") == Path("/data/report.pdf")


def test_suffix_inside_name_is_preserved() -> None:
    """Test that names containing the suffix mid-name round-trip"""
    original = Path("/data/notes.sex.txt")
    assert decrypted_path(encrypted_path(original)) == original


def test_only_trailing_occurrence_is_removed() -> None:
    """Test that an earlier .sex in the name is kept"""
    assert decrypted_path("/data/x.sex.y.sex") == Path("/data/x.sex.y")


def test_suffix_in_directory_is_ignored() -> None:
    """Test that only the file name is considered"""
    assert decrypted_path("/vault.sex/file.bin.sex") == Path("/vault.sex/file.bin")


@pytest.mark.parametrize("name", ["/data/report.pdf", "/data/.sex", "/data/report.sexy"])
def test_decrypted_path_rejects_unsuffixed_names(name: str) -> None:
    """Test that names without a usable extension are rejected"""
    assert not is_encrypted_name(name)
    with pytest.raises(InvalidArgumentError):
        decrypted_path(name)
