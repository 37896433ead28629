"""Pydantic models for descriptor trees, plus the creation report types."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _StrictModel(BaseModel):
    """Shared settings: unknown keys rejected, instances immutable."""

    model_config = ConfigDict(extra="forbid", frozen=True)


def name_problem(name: str) -> str | None:
    """Return why *name* cannot be used as an entry basename, or None if it can."""
    if not name:
        return "entry name is empty"
    if name in (".", ".."):
        return f"entry name {name!r} is reserved"
    if "/" in name or "\\" in name:
        return f"entry name {name!r} contains a path separator"
    if "\x00" in name:
        return f"entry name {name!r} contains a NUL byte"
    return None


class _Node(_StrictModel):
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        problem = name_problem(value)
        if problem:
            raise ValueError(problem)
        return value


class FileNode(_Node):
    """A file to create; empty content yields a zero-byte placeholder."""

    kind: Literal["file"] = "file"
    content: str = ""


class DirectoryNode(_Node):
    """A directory to create (if absent) before its children."""

    kind: Literal["directory"] = "directory"
    children: tuple[TreeNode, ...] = ()

    def child(self, name: str) -> TreeNode | None:
        for node in self.children:
            if node.name == name:
                return node
        return None

    def walk(
        self, prefix: PurePosixPath = PurePosixPath()
    ) -> Iterator[tuple[PurePosixPath, TreeNode]]:
        """Yield ``(relative_path, node)`` for every descendant, depth-first pre-order."""
        for node in self.children:
            path = prefix / node.name
            yield path, node
            if isinstance(node, DirectoryNode):
                yield from node.walk(path)


TreeNode = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="kind")]

DirectoryNode.model_rebuild()


class EntryKind(str, Enum):
    """What a report entry is on disk."""

    FILE = "file"
    DIRECTORY = "directory"

    @property
    def label(self) -> str:
        """Word used in log lines (``Created folder: ...``)."""
        return "file" if self is EntryKind.FILE else "folder"


@dataclass(frozen=True)
class CreatedEntry:
    """One path the walk created or found, with its kind."""

    path: Path
    kind: EntryKind


@dataclass
class CreationReport:
    """Entries touched by one walk, in the order they were reached.

    ``entries`` holds what was created (or overwritten, for files);
    ``existing`` holds what was already on disk and left alone.
    """

    entries: list[CreatedEntry] = field(default_factory=list)
    existing: list[CreatedEntry] = field(default_factory=list)
    dry_run: bool = False

    def record(self, path: Path, kind: EntryKind) -> None:
        self.entries.append(CreatedEntry(path, kind))

    def record_existing(self, path: Path, kind: EntryKind) -> None:
        self.existing.append(CreatedEntry(path, kind))

    @property
    def paths(self) -> list[Path]:
        return [e.path for e in self.entries]

    @property
    def files(self) -> list[Path]:
        return [e.path for e in self.entries if e.kind is EntryKind.FILE]

    @property
    def directories(self) -> list[Path]:
        return [e.path for e in self.entries if e.kind is EntryKind.DIRECTORY]

    def __len__(self) -> int:
        return len(self.entries)
