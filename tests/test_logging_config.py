"""Tests for the logging setup."""
import logging
import logging.handlers
from pathlib import Path
from typing import Generator

import pytest

from utils.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Put the root logger back the way pytest configured it"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only(restore_root_logger) -> None:
    """Test that a single stderr handler is installed"""
    setup_logging(level="debug")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_unknown_level_falls_back_to_info(restore_root_logger) -> None:
    """Test that an unknown level name means INFO"""
    setup_logging(level="chatty")
    assert logging.getLogger().level == logging.INFO


def test_rotating_file(tmp_path: Path, restore_root_logger) -> None:
    """Test that log files and their directory are created"""
    log_file = tmp_path / "logs" / "sexsec.log"
    setup_logging(level="INFO", log_file=str(log_file), max_files=2)

    handlers = logging.getLogger().handlers
    file_handlers = [h for h in handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].backupCount == 2

    get_logger("sexsec.test").info("written to file")
    file_handlers[0].flush()
    assert "written to file" in log_file.read_text()
