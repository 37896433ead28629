"""Scaffolder -- materialize() creates a descriptor tree under a base path.

The walk is a single depth-first pre-order recursion.  A directory is
created (or found to exist) before any of its children are attempted, and
the first failure aborts the walk without rolling back what was already
created.  The partial report travels on the raised exception.

Directories are idempotent: an existing directory is reused.  Files are
overwritten unless ``ScaffoldOptions.overwrite_files`` is False.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from tree_scaffold.errors import (
    ContentEncodingError,
    CreationIOError,
    InvalidBasePathError,
    PathKindConflictError,
    ScaffoldError,
)
from tree_scaffold.options import ScaffoldOptions
from tree_scaffold.tree.models import CreationReport, DirectoryNode, EntryKind, FileNode
from tree_scaffold.tree.validator import check_tree

logger = logging.getLogger(__name__)


def _kind_on_disk(path: Path) -> str | None:
    if path.is_dir():
        return "directory"
    if path.exists() or path.is_symlink():
        return "file" if path.is_file() else "special file"
    return None


def _check_base_path(base: Path) -> None:
    if not base.exists():
        raise InvalidBasePathError(base, "does not exist")
    if not base.is_dir():
        raise InvalidBasePathError(base, "is not a directory")
    if not os.access(base, os.W_OK | os.X_OK):
        raise InvalidBasePathError(base, "is not writable")


def _write_file(path: Path, data: bytes) -> None:
    with open(path, "wb") as f:
        f.write(data)


class _Walk:
    def __init__(self, options: ScaffoldOptions) -> None:
        self.options = options
        self.report = CreationReport(dry_run=options.dry_run)
        self._verb = "Would create" if options.dry_run else "Created"

    def directory(self, node: DirectoryNode, current: Path) -> None:
        for child in node.children:
            child_path = current / child.name
            if isinstance(child, FileNode):
                self._file(child, child_path)
            else:
                self._directory(child, child_path)

    def _created(self, path: Path, kind: EntryKind) -> None:
        self.report.record(path, kind)
        logger.info("%s %s: %s", self._verb, kind.label, path)

    def _existing_kind(self, path: Path) -> str | None:
        try:
            return _kind_on_disk(path)
        except OSError as exc:
            raise CreationIOError(path, exc, report=self.report) from exc

    def _encode(self, node: FileNode, path: Path) -> bytes:
        try:
            return node.content.encode(self.options.encoding)
        except UnicodeEncodeError as exc:
            raise ContentEncodingError(
                path, self.options.encoding, exc, report=self.report
            ) from exc

    def _file(self, node: FileNode, path: Path) -> None:
        on_disk = self._existing_kind(path)
        if on_disk is not None and on_disk != "file":
            raise PathKindConflictError(path, "file", on_disk, report=self.report)
        if on_disk == "file" and not self.options.overwrite_files:
            self.report.record_existing(path, EntryKind.FILE)
            logger.info("Kept existing file: %s", path)
            return
        data = self._encode(node, path)
        if not self.options.dry_run:
            try:
                _write_file(path, data)
            except OSError as exc:
                raise CreationIOError(path, exc, report=self.report) from exc
        self._created(path, EntryKind.FILE)

    def _directory(self, node: DirectoryNode, path: Path) -> None:
        on_disk = self._existing_kind(path)
        if on_disk is not None and on_disk != "directory":
            raise PathKindConflictError(path, "directory", on_disk, report=self.report)
        if on_disk == "directory":
            self.report.record_existing(path, EntryKind.DIRECTORY)
            logger.debug("Folder already exists: %s", path)
        else:
            if not self.options.dry_run:
                try:
                    path.mkdir()
                except OSError as exc:
                    raise CreationIOError(path, exc, report=self.report) from exc
            self._created(path, EntryKind.DIRECTORY)
        self.directory(node, path)


def materialize(
    base_path: str | Path,
    root: DirectoryNode,
    options: ScaffoldOptions | None = None,
) -> CreationReport:
    """Create every entry of *root* beneath *base_path*.

    Returns the report of created entries in creation order.  Raises a
    ``ScaffoldError`` subclass on failure; errors raised during the walk
    carry the partial report as ``exc.report``.
    """
    options = options or ScaffoldOptions()
    if not isinstance(root, DirectoryNode):
        raise ScaffoldError(
            f"Scaffold root must be a directory node, got {type(root).__name__}"
        )
    check_tree(root)

    base = Path(base_path)
    _check_base_path(base)

    walk = _Walk(options)
    walk.directory(root, base)
    logger.debug(
        "Scaffold %s: %d created, %d already present",
        root.name,
        len(walk.report.entries),
        len(walk.report.existing),
    )
    return walk.report
