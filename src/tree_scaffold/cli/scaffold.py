"""CLI handlers for ``scaffold``."""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from tree_scaffold.errors import ScaffoldError
from tree_scaffold.options import ScaffoldOptions
from tree_scaffold.tree.loader import builtin_descriptor_names, resolve_descriptor
from tree_scaffold.tree.materializer import materialize
from tree_scaffold.tree.report import format_json, format_table, render_tree
from tree_scaffold.tree.validator import lint_tree

logger = logging.getLogger(__name__)


def run_list(args: Namespace) -> None:
    for name in builtin_descriptor_names():
        print(name)


def run_check(args: Namespace) -> None:
    try:
        tree = resolve_descriptor(args.descriptor)
    except ScaffoldError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    problems = lint_tree(tree)
    if problems:
        for problem in problems:
            print(f"{args.descriptor}: {problem}", file=sys.stderr)
        sys.exit(1)
    print(render_tree(tree))


def run_scaffold(args: Namespace) -> None:
    options = ScaffoldOptions(overwrite_files=args.force, dry_run=args.dry_run)
    try:
        tree = resolve_descriptor(args.descriptor)
        report = materialize(Path(args.base), tree, options)
    except ScaffoldError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if exc.report is not None and exc.report.entries:
            logger.warning(
                "Stopped after creating %d entries; re-run after fixing the cause",
                len(exc.report.entries),
            )
        if args.json and exc.report is not None:
            print(format_json(exc.report))
        sys.exit(1)

    if args.json:
        print(format_json(report))
    elif args.dry_run or args.summary:
        print(format_table(report))
