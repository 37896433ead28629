"""CLI entry point: ``scaffold [descriptor]`` or ``python -m tree_scaffold``."""

from __future__ import annotations

import argparse
import logging

DEFAULT_DESCRIPTOR = "myos"


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")
    logging.getLogger("tree_scaffold").setLevel(level)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="scaffold",
        description="Create a directory/file skeleton from a descriptor",
    )
    parser.add_argument(
        "descriptor",
        nargs="?",
        default=DEFAULT_DESCRIPTOR,
        help=f"Descriptor file (YAML/JSON) or built-in name (default: {DEFAULT_DESCRIPTOR})",
    )
    parser.add_argument("--base", default=".", help="Directory to scaffold into (default: .)")
    parser.add_argument(
        "--force",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Overwrite files that already exist (default: on)",
    )
    parser.add_argument(
        "--dry-run", action="store_true", default=False, help="Show what would be created"
    )
    parser.add_argument(
        "--check", action="store_true", default=False, help="Validate the descriptor only"
    )
    parser.add_argument("--json", action="store_true", default=False, help="Print the report as JSON")
    parser.add_argument(
        "--summary", action="store_true", default=False, help="Print a summary table when done"
    )
    parser.add_argument(
        "--list", action="store_true", default=False, help="List built-in descriptors"
    )
    noise = parser.add_mutually_exclusive_group()
    noise.add_argument("-v", "--verbose", action="store_true", default=False)
    noise.add_argument("-q", "--quiet", action="store_true", default=False)

    args = parser.parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    from tree_scaffold.cli.scaffold import run_check, run_list, run_scaffold

    if args.list:
        run_list(args)
    elif args.check:
        run_check(args)
    else:
        run_scaffold(args)


if __name__ == "__main__":
    main()
