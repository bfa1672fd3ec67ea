"""Shared fixtures for the SexSec test suite."""
from pathlib import Path
from typing import Dict, Generator

import pytest

from sexsec.api import STATE
from sexsec.core.state import CipherSettings

TEST_PASSPHRASE = "correct horse battery staple"

TREE_CONTENTS: Dict[str, bytes] = {
    "a.txt": b"alpha file\n",
    "b.txt": b"bravo file with a little more content\n" * 10,
    "c/d.txt": b"delta lives in a subdirectory\n",
}


@pytest.fixture
def settings() -> CipherSettings:
    """Keyed settings with the library defaults pinned"""
    return CipherSettings.create(
        passphrase=TEST_PASSPHRASE, algorithm="aes-256-cbc", encoding="hex", iv_length=16)


@pytest.fixture
def unkeyed_settings() -> CipherSettings:
    """Settings without a key"""
    return CipherSettings.create(algorithm="aes-256-cbc", encoding="hex", iv_length=16)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory with a.txt, b.txt and c/d.txt"""
    root = tmp_path / "tree"
    for relative, content in TREE_CONTENTS.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    return root


@pytest.fixture(autouse=True)
def reset_global_state() -> Generator[None, None, None]:
    """Keep the process-wide configuration state isolated between tests"""
    STATE.reset()
    yield
    STATE.reset()


@pytest.fixture
def tree_contents() -> Dict[str, bytes]:
    """Relative path to content of every file in sample_tree"""
    return dict(TREE_CONTENTS)
