"""Shared fixtures for amem tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def memory_dir(tmp_path: Path) -> Path:
    root = tmp_path / ".amem"
    root.mkdir()
    return root


@pytest.fixture
def write_note(memory_dir: Path):
    """Write a UTF-8 note below the memory directory and return its path."""

    def _write(rel_path: str, content: str) -> Path:
        path = memory_dir / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
