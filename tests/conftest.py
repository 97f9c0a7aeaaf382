"""Shared test fixtures — fake platforms, file trees, logger reset."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import pytest

from fsaudit.config.schema import PlatformPaths


@pytest.fixture(autouse=True)
def _reset_fsaudit_logger():
    """Undo configure_logging() so caplog sees fsaudit records."""
    yield
    logger = logging.getLogger("fsaudit")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def fake_platform() -> PlatformPaths:
    """POSIX platform whose blacklist roots are single path components.

    With single-component roots the final-component predicate can match.
    """
    return PlatformPaths(
        separator="/",
        system_root="SystemRoot",
        user_home="/home/tester",
        app_data="/home/tester/.local/share",
        temp_dir="TempRoot",
        os_name="posix",
    )


@pytest.fixture
def windows_platform() -> PlatformPaths:
    return PlatformPaths(
        separator="\\",
        system_root="C:\\Windows",
        user_home="C:\\users\\tester",
        app_data="C:\\users\\tester\\appdata",
        temp_dir="C:\\users\\tester\\appdata\\local\\temp",
        os_name="nt",
    )


def build_tree(root: Path, files: Dict[str, Optional[str]]) -> Path:
    """Create *files* under *root*. A None value creates a directory."""
    for rel, content in files.items():
        path = root / rel
        if content is None:
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_tree(tmp_path: Path):
    """Return a builder that populates tmp_path and returns it."""

    def _make(files: Dict[str, Optional[str]]) -> Path:
        return build_tree(tmp_path, files)

    return _make
