"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with a flag telling directories apart from files. Children
    keep the order in which they were attached, which is the enumeration order of
    the directory they were read from.

    Attributes:
        name (str): The base name of the file or directory.
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("proj", is_dir=True)
        >>> child = FileSystemNode("a.rs", parent=root)
        >>> [node.name for node in root.children]
        ['a.rs']
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir

    @property
    def file_names(self) -> list:
        """Names of the direct file children, in attachment order."""
        return [child.name for child in self.children if not child.is_dir]

    @property
    def subdirectories(self) -> list:
        """Direct directory children, in attachment order."""
        return [child for child in self.children if child.is_dir]
