"""Output formatters: creation report as a table or JSON, descriptor tree as ASCII."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tree_scaffold.tree.models import CreatedEntry, CreationReport, DirectoryNode


def _row(cols: list[str], widths: list[int]) -> str:
    return "  ".join(c.ljust(w) for c, w in zip(cols, widths))


def format_table(report: CreationReport) -> str:
    lines: list[str] = []

    title = "Scaffold Plan" if report.dry_run else "Scaffold Report"
    lines.append(title)
    lines.append("=" * 72)
    widths = [10, 10, 48]
    lines.append(_row(["Status", "Kind", "Path"], widths))
    lines.append("-" * 72)
    status = "planned" if report.dry_run else "created"
    for e in report.entries:
        lines.append(_row([status, e.kind.value, str(e.path)], widths))
    for e in report.existing:
        lines.append(_row(["existing", e.kind.value, str(e.path)], widths))
    lines.append("-" * 72)

    n_files = len(report.files)
    n_dirs = len(report.directories)
    lines.append(
        f"{n_dirs} folder{'s' if n_dirs != 1 else ''}"
        f" | {n_files} file{'s' if n_files != 1 else ''}"
        f" | {len(report.existing)} already present"
    )
    return "\n".join(lines)


def _entry_to_dict(e: CreatedEntry) -> dict[str, Any]:
    return {"path": str(e.path), "kind": e.kind.value}


def format_json(report: CreationReport) -> str:
    payload: dict[str, Any] = {
        "dry_run": report.dry_run,
        "created": [_entry_to_dict(e) for e in report.entries],
        "existing": [_entry_to_dict(e) for e in report.existing],
    }
    return json.dumps(payload, indent=2)


def render_tree(root: DirectoryNode, *, label: str | Path | None = None) -> str:
    """Draw *root* the way ``tree`` does, directories suffixed with ``/``."""
    lines = [f"{label if label is not None else root.name}/"]

    def _visit(node: DirectoryNode, indent: str) -> None:
        last = len(node.children) - 1
        for i, child in enumerate(node.children):
            branch = "└── " if i == last else "├── "
            if isinstance(child, DirectoryNode):
                lines.append(f"{indent}{branch}{child.name}/")
                _visit(child, indent + ("    " if i == last else "│   "))
            else:
                lines.append(f"{indent}{branch}{child.name}")

    _visit(root, "")
    return "\n".join(lines)
