"""Pytest configuration for the launcher test suite.

Puts the project root on *sys.path* so ``import vibecodekit`` works without an
editable install, and isolates each test from ambient config and logging state.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.delenv("VIBECODEKIT_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _reset_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    for attr in ("_vibecodekit_configured", "_vibecodekit_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)


@pytest.fixture()
def layout(tmp_path):
    """A fake install tree: <root>/pkg is the launcher dir, <root>/install.sh its script.

    Returns (launcher_dir, script_path, workdir).
    """

    root = tmp_path / "site"
    pkg = root / "pkg"
    pkg.mkdir(parents=True)
    workdir = tmp_path / "work"
    workdir.mkdir()
    return pkg, root / "install.sh", workdir
