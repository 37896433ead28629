"""YAML descriptor loading.

A descriptor maps entry names to either a mapping (a directory) or a string
(a file and its content).  A null value is an empty file.  JSON descriptors
load too, since JSON is a subset of YAML.

Mappings are parsed into ordered ``(key, value)`` pairs rather than dicts so
that duplicate sibling names survive parsing and can be rejected instead of
silently collapsing into the last occurrence.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tree_scaffold.errors import DescriptorError, DuplicateNameError
from tree_scaffold.tree.models import DirectoryNode, FileNode, TreeNode, name_problem

DESCRIPTOR_SUFFIXES = (".yaml", ".yml", ".json")
BUILTIN_PACKAGE = "tree_scaffold.descriptors"


class MappingPairs(list):
    """A YAML mapping kept as an ordered list of ``(key, value)`` pairs."""


class _DescriptorLoader(yaml.SafeLoader):
    pass


def _construct_pairs(loader: _DescriptorLoader, node: yaml.MappingNode) -> MappingPairs:
    loader.flatten_mapping(node)
    return MappingPairs(loader.construct_pairs(node, deep=True))


_DescriptorLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_pairs
)


def parse_descriptor(text: str, *, source: str = "<descriptor>") -> MappingPairs:
    """Parse descriptor text into raw mapping pairs."""
    try:
        data = yaml.load(text, Loader=_DescriptorLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        raise DescriptorError(f"Invalid YAML in {source}: {exc}") from exc
    if data is None:
        raise DescriptorError(f"Empty descriptor: {source}")
    if not isinstance(data, MappingPairs):
        raise DescriptorError(f"Descriptor root must be a mapping: {source}")
    return data


def _items(data: Any) -> list[tuple[Any, Any]]:
    if isinstance(data, MappingPairs):
        return list(data)
    return list(data.items())


def _is_mapping(value: Any) -> bool:
    return isinstance(value, (MappingPairs, dict))


def _build_children(data: Any, location: str) -> tuple[TreeNode, ...]:
    children: list[TreeNode] = []
    seen: set[str] = set()
    for key, value in _items(data):
        if not isinstance(key, str):
            raise DescriptorError(
                f"Entry names must be strings, got {type(key).__name__} {key!r} "
                f"under {location or '<root>'} (quote the name in YAML)"
            )
        path = f"{location}/{key}" if location else key
        problem = name_problem(key)
        if problem:
            raise DescriptorError(f"{path}: {problem}")
        if key in seen:
            raise DuplicateNameError(path)
        seen.add(key)

        if _is_mapping(value):
            children.append(
                DirectoryNode(name=key, children=_build_children(value, path))
            )
        elif value is None or isinstance(value, str):
            children.append(FileNode(name=key, content=value or ""))
        else:
            raise DescriptorError(
                f"{path}: expected a mapping (directory) or a string (file content), "
                f"got {type(value).__name__}"
            )
    return tuple(children)


def build_tree(data: Any, *, name: str = "root") -> DirectoryNode:
    """Turn a parsed descriptor (pairs or a plain dict) into a ``DirectoryNode``.

    Raises ``DuplicateNameError`` on the first repeated sibling name and
    ``DescriptorError`` for any other structural problem.
    """
    if not _is_mapping(data):
        raise DescriptorError(
            f"Descriptor root must be a mapping, got {type(data).__name__}"
        )
    try:
        return DirectoryNode(name=name, children=_build_children(data, ""))
    except ValidationError as exc:
        raise DescriptorError(f"Invalid descriptor {name!r}: {exc}") from exc


def load_descriptor_file(path: str | Path) -> DirectoryNode:
    """Read and build a descriptor file.  The root is named after the file stem."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DescriptorError(f"Cannot read descriptor {path}: {exc}") from exc
    return build_tree(parse_descriptor(text, source=str(path)), name=path.stem)


def tree_to_mapping(root: DirectoryNode) -> dict[str, Any]:
    """Inverse of :func:`build_tree`: plain nested dicts, ready for YAML/JSON dumping."""
    out: dict[str, Any] = {}
    for node in root.children:
        if isinstance(node, DirectoryNode):
            out[node.name] = tree_to_mapping(node)
        else:
            out[node.name] = node.content
    return out


def builtin_descriptor_names() -> list[str]:
    """Names of the descriptors shipped with the package."""
    names = []
    for entry in resources.files(BUILTIN_PACKAGE).iterdir():
        if entry.name.endswith(DESCRIPTOR_SUFFIXES) and not entry.name.startswith("_"):
            names.append(entry.name.rsplit(".", 1)[0])
    return sorted(names)


def load_builtin_descriptor(name: str) -> DirectoryNode:
    base = resources.files(BUILTIN_PACKAGE)
    for suffix in DESCRIPTOR_SUFFIXES:
        entry = base.joinpath(name + suffix)
        if entry.is_file():
            text = entry.read_text(encoding="utf-8")
            return build_tree(parse_descriptor(text, source=f"builtin:{name}"), name=name)
    available = ", ".join(builtin_descriptor_names()) or "none"
    raise DescriptorError(f"Unknown built-in descriptor {name!r} (available: {available})")


def resolve_descriptor(ref: str | Path) -> DirectoryNode:
    """Load *ref* as a file path if one exists, otherwise as a built-in name."""
    path = Path(ref)
    if path.is_file():
        return load_descriptor_file(path)
    if path.suffix in DESCRIPTOR_SUFFIXES or len(path.parts) > 1:
        raise DescriptorError(f"Descriptor file not found: {path}")
    return load_builtin_descriptor(str(ref))
