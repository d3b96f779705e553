"""Construction of the nested directory structure emitted in JSON mode."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from rcat.exclusion_rules.base_rules import BaseExclusionRules
from rcat.file_system_tree.entries import list_entries
from rcat.file_system_tree.file_system_node import FileSystemNode

logger = logging.getLogger(__name__)

# Key holding the names of a directory's direct file children
FILES_KEY = "files"


def build_tree(
    path: Path,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    max_depth: Optional[int] = None,
) -> FileSystemNode:
    """Build a node tree for ``path`` and everything below it.

    Entries are skipped when their own base name is excluded, exactly as in the
    printing traversal. No extension filtering is applied. Subdirectories beyond
    ``max_depth`` are left out of the tree.

    A ``path`` that is not a directory (for example a regular file) yields a
    directory node with no children.

    Args:
        path: Root of the tree.
        exclusion_rules: Rules used to skip entries by name. None skips nothing.
        max_depth: Maximum recursion depth below ``path``. None means unlimited.

    Returns:
        The root node of the tree.

    Raises:
        DirectoryReadError: If any directory in the tree cannot be enumerated.

    Example:
        >>> root = build_tree(Path("proj"))  # doctest: +SKIP
        >>> to_mapping(root)  # doctest: +SKIP
        {'files': ['a.rs', 'b.txt'], 'sub': {'files': ['c.rs']}}
    """
    root = FileSystemNode(path.name or str(path), is_dir=True)
    if path.is_dir():
        _add_children(root, path, exclusion_rules, max_depth)
    return root


def _add_children(
    node: FileSystemNode,
    directory: Path,
    exclusion_rules: Optional[BaseExclusionRules],
    depth: Optional[int],
) -> None:
    for entry in list_entries(directory):
        is_dir = entry.is_dir()
        if exclusion_rules is not None and exclusion_rules.exclude(entry.name, is_dir=is_dir):
            logger.info("Skipping: %s", entry.name)
            continue

        if entry.is_file():
            FileSystemNode(entry.name, parent=node)
        elif is_dir:
            if depth is None:
                child = FileSystemNode(entry.name, parent=node, is_dir=True)
                _add_children(child, entry, exclusion_rules, None)
            elif depth > 0:
                child = FileSystemNode(entry.name, parent=node, is_dir=True)
                _add_children(child, entry, exclusion_rules, depth - 1)


def to_mapping(node: FileSystemNode) -> Dict[str, Any]:
    """Convert a directory node into the nested mapping serialized as JSON.

    The mapping holds a ``files`` list with the direct file children and one key
    per subdirectory. A subdirectory literally named ``files`` cannot be
    represented next to the file list and is dropped with a warning.

    Args:
        node: A directory node produced by build_tree.

    Returns:
        The nested mapping for ``node``.
    """
    mapping: Dict[str, Any] = {FILES_KEY: node.file_names}
    for child in node.subdirectories:
        if child.name == FILES_KEY:
            logger.warning("Directory named %r collides with the file list key and is omitted", FILES_KEY)
            continue
        mapping[child.name] = to_mapping(child)
    return mapping
