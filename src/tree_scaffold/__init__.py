"""tree-scaffold -- create directory/file skeletons from declarative descriptors.

A descriptor is a YAML (or JSON) mapping of names to nested mappings
(directories) or strings (file contents).  The scaffolder walks it and
creates each entry under a base path.

Public API::

    from tree_scaffold import ScaffoldOptions
    from tree_scaffold.tree import load_descriptor_file, materialize

    tree = load_descriptor_file("layout.yaml")
    report = materialize(".", tree, ScaffoldOptions(overwrite_files=False))
"""

from tree_scaffold.options import ScaffoldOptions

__all__ = ["ScaffoldOptions"]
__version__ = "0.1.0"
