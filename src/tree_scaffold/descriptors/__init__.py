"""Descriptors shipped with tree-scaffold; each file registers under its stem."""
