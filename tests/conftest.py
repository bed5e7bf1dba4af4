"""Root test configuration: isolate environment and root logger state per test"""

import logging

import pytest

from microblog.config import Settings


@pytest.fixture(autouse=True)
def clear_microblog_env(monkeypatch):
    """Settings read MICROBLOG_<FIELD> env vars; start each test without them."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MICROBLOG_{name.upper()}", raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI commands reconfigure the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
