"""Shared fixtures for the File Sorter tests."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; put it back after each test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Directory holding a.pdf (10 bytes), b.jpg (20 bytes) and a subdirectory c/."""
    (tmp_path / "a.pdf").write_bytes(b"x" * 10)
    (tmp_path / "b.jpg").write_bytes(b"x" * 20)
    (tmp_path / "c").mkdir()
    return tmp_path
