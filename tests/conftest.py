"""
Shared test fixtures and utilities for findex tests.

This module provides common fixtures, sample trees and helpers to keep the
test suite consistent.
"""

import logging
from pathlib import Path

import pytest

from findex.core.config import IndexConfig
from findex.utils import logging_config
from findex.utils.logging_config import IndexLogger

# 16 and 17 bytes of plain text
USER1_JSON = '{"name": "bob"}\n'
USER2_JSON = '{"name": "anna"}\n'


@pytest.fixture(autouse=True)
def reset_default_logger():
    """Keep the default logger from leaking handlers between tests."""
    logging_config._global_logger = None
    yield
    logging_config._global_logger = None
    root = logging.getLogger("findex")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)


@pytest.fixture
def quiet_logger() -> IndexLogger:
    """A logger with no handlers attached."""
    return IndexLogger(name="findex.tests", enable_console=False)


@pytest.fixture
def index_path(tmp_path: Path) -> Path:
    return tmp_path / "out" / "index.csv"


@pytest.fixture
def index_config(index_path: Path) -> IndexConfig:
    index_path.parent.mkdir(parents=True, exist_ok=True)
    return IndexConfig(index_path=index_path)


@pytest.fixture
def json_tree(tmp_path: Path) -> Path:
    """Directory holding user1.json (16 bytes) and user2.json (17 bytes)."""
    root = tmp_path / "data"
    root.mkdir()
    (root / "user1.json").write_text(USER1_JSON, encoding="utf-8")
    (root / "user2.json").write_text(USER2_JSON, encoding="utf-8")
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """
    Layout:
        tree/
          a.txt
          b/
            inner.txt
            deeper/
              z.bin
          c.txt
          .git/
            config
            objects/pack.idx
          .gitignore
          .github/workflow.yml
          my.git
    """
    root = tmp_path / "tree"
    (root / "b" / "deeper").mkdir(parents=True)
    (root / "a.txt").write_text("alpha\n", encoding="utf-8")
    (root / "b" / "inner.txt").write_text("inner\n", encoding="utf-8")
    (root / "b" / "deeper" / "z.bin").write_bytes(b"\x00\x01\x02\x03")
    (root / "c.txt").write_text("gamma\n", encoding="utf-8")

    (root / ".git" / "objects").mkdir(parents=True)
    (root / ".git" / "config").write_text("[core]\n", encoding="utf-8")
    (root / ".git" / "objects" / "pack.idx").write_bytes(b"\xff\x74\x4f\x63")
    (root / ".gitignore").write_text("*.pyc\n", encoding="utf-8")
    (root / ".github").mkdir()
    (root / ".github" / "workflow.yml").write_text("on: push\n", encoding="utf-8")
    (root / "my.git").write_text("not excluded\n", encoding="utf-8")
    return root


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
    config.addinivalue_line("markers", "indexer: Indexer-related tests")
