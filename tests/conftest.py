"""Test fixtures for tree-scaffold tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tree_scaffold.tree.models import DirectoryNode, FileNode


def write_descriptor(path: Path, body: str) -> Path:
    path.write_text(body, encoding="utf-8")
    return path


def make_test_tree() -> DirectoryNode:
    """The ``{"A": {"x.txt": "hi", "B": {}}}`` tree."""
    return DirectoryNode(
        name="test_tree",
        children=(
            DirectoryNode(
                name="A",
                children=(
                    FileNode(name="x.txt", content="hi"),
                    DirectoryNode(name="B"),
                ),
            ),
        ),
    )


def snapshot(base: Path) -> set[str]:
    """Every path under *base*, relative and slash-separated."""
    return {p.relative_to(base).as_posix() for p in base.rglob("*")}


@pytest.fixture
def base(tmp_path: Path) -> Path:
    target = tmp_path / "t"
    target.mkdir()
    return target
