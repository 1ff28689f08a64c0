"""Shared fixtures for file-organizer tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def sample_folder(tmp_path: Path) -> Path:
    """Return a folder holding ``a.txt``, ``b.TXT``, ``c``, and ``sub/``.

    Args:
        tmp_path: Temporary directory provided by pytest.

    Returns:
        Path: The populated folder.
    """
    root = tmp_path / "inbox"
    root.mkdir()
    (root / "a.txt").write_text("alpha", encoding="utf-8")
    (root / "b.TXT").write_text("bravo", encoding="utf-8")
    (root / "c").write_text("charlie", encoding="utf-8")
    (root / "sub").mkdir()
    (root / "sub" / "nested.md").write_text("nested", encoding="utf-8")
    return root


@pytest.fixture
def snapshot_tree() -> Callable[[Path], dict[str, bytes | None]]:
    """Return a helper mapping every path under a root to its bytes, or None for directories."""

    def _snapshot(root: Path) -> dict[str, bytes | None]:
        tree: dict[str, bytes | None] = {}
        for path in sorted(root.rglob("*")):
            key = path.relative_to(root).as_posix()
            tree[key] = None if path.is_dir() else path.read_bytes()
        return tree

    return _snapshot
