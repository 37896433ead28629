"""Tree subsystem -- descriptor models, loading, validation and the scaffold walk."""

from tree_scaffold.tree.loader import (
    build_tree,
    builtin_descriptor_names,
    load_builtin_descriptor,
    load_descriptor_file,
    resolve_descriptor,
    tree_to_mapping,
)
from tree_scaffold.tree.materializer import materialize
from tree_scaffold.tree.models import (
    CreatedEntry,
    CreationReport,
    DirectoryNode,
    EntryKind,
    FileNode,
    TreeNode,
)
from tree_scaffold.tree.validator import check_tree, lint_tree

__all__ = [
    "CreatedEntry",
    "CreationReport",
    "DirectoryNode",
    "EntryKind",
    "FileNode",
    "TreeNode",
    "build_tree",
    "builtin_descriptor_names",
    "check_tree",
    "lint_tree",
    "load_builtin_descriptor",
    "load_descriptor_file",
    "materialize",
    "resolve_descriptor",
    "tree_to_mapping",
]
