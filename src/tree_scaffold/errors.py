"""Scaffold error taxonomy.

Descriptor problems (``DescriptorError``, ``DuplicateNameError``) are raised
before anything touches the filesystem.  Walk problems carry the partial
``CreationReport`` built up to the failure point on ``.report``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tree_scaffold.tree.models import CreationReport


class ScaffoldError(Exception):
    """Base class for every failure the scaffolder reports."""

    def __init__(self, message: str, *, report: CreationReport | None = None) -> None:
        super().__init__(message)
        self.report = report


class DescriptorError(ScaffoldError):
    """The descriptor is unreadable or structurally malformed."""


class DuplicateNameError(DescriptorError):
    """Two sibling entries declare the same name."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Duplicate entry name in descriptor: {path}")
        self.path = path


class InvalidBasePathError(ScaffoldError):
    """The base path is missing, not a directory, or not writable."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid base path {path}: {reason}")
        self.path = path
        self.reason = reason


class PathKindConflictError(ScaffoldError):
    """Something of the wrong kind already exists at a declared path."""

    def __init__(
        self,
        path: Path,
        expected: str,
        actual: str,
        *,
        report: CreationReport | None = None,
    ) -> None:
        super().__init__(
            f"Cannot create {expected} at {path}: a {actual} already exists there",
            report=report,
        )
        self.path = path
        self.expected = expected
        self.actual = actual


class CreationIOError(ScaffoldError):
    """An OS-level create/write failed partway through the walk."""

    def __init__(
        self,
        path: Path,
        cause: OSError,
        *,
        report: CreationReport | None = None,
    ) -> None:
        detail = cause.strerror or str(cause)
        super().__init__(f"Failed to create {path}: {detail}", report=report)
        self.path = path
        self.cause = cause


class ContentEncodingError(ScaffoldError):
    """A file's declared content cannot be encoded; nothing is written for it."""

    def __init__(
        self,
        path: Path,
        encoding: str,
        cause: UnicodeEncodeError,
        *,
        report: CreationReport | None = None,
    ) -> None:
        super().__init__(
            f"Cannot encode content for {path} as {encoding}: {cause.reason}",
            report=report,
        )
        self.path = path
        self.encoding = encoding
        self.cause = cause
