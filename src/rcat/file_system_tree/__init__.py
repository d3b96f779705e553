"""File system tree representation used by the JSON output mode.

This package provides directory enumeration shared by every traversal and the
anytree-based node type from which the JSON tree is built.
"""

from .entries import list_entries
from .file_system_node import FileSystemNode
from .tree_builder import FILES_KEY, build_tree, to_mapping

__all__ = [
    "FILES_KEY",
    "FileSystemNode",
    "build_tree",
    "list_entries",
    "to_mapping",
]
