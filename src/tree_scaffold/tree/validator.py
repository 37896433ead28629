"""Descriptor validation.

Two entry points with different contracts:

  - ``check_tree`` fails fast.  The scaffolder calls it before touching the
    filesystem so a bad tree never produces a partial scaffold.
  - ``lint_tree`` collects every problem it can find and returns them as
    strings, for ``scaffold --check``.

Lint checks beyond what loading enforces:
  - Sibling names that differ only by case (collide on case-insensitive
    filesystems)
  - Names with leading or trailing whitespace
  - Names reserved on Windows (CON, NUL, COM1, ...)
  - Names ending in a dot or space
"""

from __future__ import annotations

from pathlib import PurePosixPath

from tree_scaffold.errors import DuplicateNameError
from tree_scaffold.tree.models import DirectoryNode

_WINDOWS_RESERVED = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)


def find_duplicate_names(root: DirectoryNode) -> list[str]:
    """Return the descriptor path of every repeated sibling name, in walk order."""
    duplicates: list[str] = []

    def _visit(node: DirectoryNode, prefix: PurePosixPath) -> None:
        seen: set[str] = set()
        for child in node.children:
            path = prefix / child.name
            if child.name in seen:
                duplicates.append(str(path))
            seen.add(child.name)
            if isinstance(child, DirectoryNode):
                _visit(child, path)

    _visit(root, PurePosixPath())
    return duplicates


def check_tree(root: DirectoryNode) -> None:
    """Raise ``DuplicateNameError`` for the first repeated sibling name."""
    duplicates = find_duplicate_names(root)
    if duplicates:
        raise DuplicateNameError(duplicates[0])


def lint_tree(root: DirectoryNode) -> list[str]:
    """Portability problems in an already-loaded tree, as ``"<entry>: <problem>"`` strings."""
    problems = [f"{dup}: Duplicate entry name" for dup in find_duplicate_names(root)]

    def _visit(node: DirectoryNode, prefix: PurePosixPath) -> None:
        folded: dict[str, str] = {}
        for child in node.children:
            path = prefix / child.name
            name = child.name
            key = name.casefold()
            if key in folded and folded[key] != name:
                problems.append(
                    f"{path}: Name differs only by case from sibling '{folded[key]}'"
                )
            folded.setdefault(key, name)
            if name != name.strip():
                problems.append(f"{path}: Name has leading or trailing whitespace")
            if name.split(".", 1)[0].upper() in _WINDOWS_RESERVED:
                problems.append(f"{path}: Name '{name}' is reserved on Windows")
            if name.endswith((".", " ")):
                problems.append(f"{path}: Name ends with a dot or space")
            if isinstance(child, DirectoryNode):
                _visit(child, path)

    _visit(root, PurePosixPath())
    return problems

