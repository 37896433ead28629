"""Scaffold options -- the knobs a caller can turn on a single walk.

The CLI maps its flags onto this dataclass; library callers construct it
directly::

    options = ScaffoldOptions(overwrite_files=False)
    report = materialize("/tmp/project", tree, options)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScaffoldOptions:
    """Behavior switches for :func:`tree_scaffold.tree.materializer.materialize`.

    Attributes:
        overwrite_files: Rewrite files that already exist at a declared
            file path.  Directories are never recreated regardless of this
            setting.  When False, existing files are left untouched and
            recorded as existing in the report.
        dry_run: Compute the report without creating anything.  Kind
            conflicts with what is already on disk are still detected.
        encoding: Text encoding used to write file contents.
    """

    overwrite_files: bool = True
    dry_run: bool = False
    encoding: str = "utf-8"
