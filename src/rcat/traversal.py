"""Depth-first traversal that feeds files to the selected output mode.

This module provides FileProcessor, which walks a root path, applies the name
exclusion rules, the extension filter and the depth limit, and streams the output
of the configured mode as strings.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional

from rcat.config import RcatConfig
from rcat.exceptions import PathNotFoundError, SyntaxHighlightingError
from rcat.file_system_tree.entries import list_entries
from rcat.file_system_tree.tree_builder import build_tree
from rcat.rendering.highlighter import SyntaxHighlighter
from rcat.rendering.renderer import format_file_entry, render_file_contents, render_tree_json
from rcat.rendering.theme import theme_for
from rcat.types import OutputMode, PathType

logger = logging.getLogger(__name__)


def file_extension(name: str) -> str:
    """Return the extension of a file name without the leading dot.

    Only the part after the last dot counts. Names without a dot, and names whose
    only dot is the leading one, have no extension.

    Example:
        >>> file_extension("main.rs")
        'rs'
        >>> file_extension("archive.tar.gz")
        'gz'
        >>> file_extension(".bashrc")
        ''
        >>> file_extension("Makefile")
        ''
    """
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return ""
    return extension


class FileProcessor:
    """Streams the output of one rcat run.

    Output is produced lazily: nothing is read from disk until the iterator
    returned by run() is consumed. Files are visited depth-first in pre-order,
    entries of a directory in sorted name order, and every subdirectory is finished
    before its next sibling is looked at.

    Errors raised while rendering a single file (unreadable file, highlighting
    failure) are logged and the traversal continues. Errors while enumerating a
    directory abort the run.

    Attributes:
        config (RcatConfig): Parameters of the run.
        file_count (int): Files dispatched to the renderer so far.
        error_count (int): Files whose rendering failed so far.

    Example:
        >>> processor = FileProcessor(RcatConfig(root_path=Path("proj"), extension="rs"))  # doctest: +SKIP
        >>> for chunk in processor.run():  # doctest: +SKIP
        ...     print(chunk, end="")
    """

    def __init__(self, config: RcatConfig) -> None:
        self.config = config
        self.theme = theme_for(config.no_color)
        self.highlighter: Optional[SyntaxHighlighter] = None if config.no_color else SyntaxHighlighter()
        self.file_count = 0
        self.error_count = 0

    def run(self, path: Optional[PathType] = None) -> Iterator[str]:
        """Process a file or directory and yield the output of the configured mode.

        In JSON mode the tree rooted at ``path`` is built completely and emitted
        as one chunk; a file root is described as a directory without entries.
        Otherwise a directory root is traversed, and a file root is rendered
        directly without applying the extension filter.

        Args:
            path: Root to process. Defaults to the configured root path.

        Yields:
            Output chunks ready to be written.

        Raises:
            PathNotFoundError: If the path does not exist.
            DirectoryReadError: If a directory cannot be enumerated.
        """
        root = Path(path) if path is not None else self.config.root_path
        if not root.exists():
            raise PathNotFoundError(str(root))

        if self.config.mode is OutputMode.JSON:
            tree = build_tree(root, self.config.exclusion_rules, self.config.max_depth)
            yield render_tree_json(tree)
        elif root.is_dir():
            yield from self.process_directory(root, self.config.max_depth)
        else:
            yield from self._process_file_safely(root)

        logger.debug("Processed %d files, %d failed", self.file_count, self.error_count)

    def process_directory(self, directory: Path, depth: Optional[int]) -> Iterator[str]:
        """Traverse a directory, yielding output for every qualifying file.

        Args:
            directory: Directory to traverse. Anything else yields nothing.
            depth: Remaining recursion depth. None is unlimited; at 0 the
                directory's files are processed but its subdirectories are not.

        Yields:
            Output chunks ready to be written.

        Raises:
            DirectoryReadError: If this directory or any subdirectory cannot be
                enumerated.
        """
        if not directory.is_dir():
            return

        for entry in list_entries(directory):
            is_dir = entry.is_dir()
            if self.config.exclusion_rules.exclude(entry.name, is_dir=is_dir):
                logger.info("Skipping: %s", entry.name)
                continue

            if entry.is_file():
                logger.debug("file found %s", entry)
                if self.matches_extension(entry.name):
                    yield from self._process_file_safely(entry)

            if is_dir:
                logger.debug("directory found %s", entry)
                if depth is None:
                    yield from self.process_directory(entry, None)
                elif depth > 0:
                    yield from self.process_directory(entry, depth - 1)

    def process_file(self, path: Path) -> Iterator[str]:
        """Yield the output for one file according to the output mode.

        List mode never opens the file.
        """
        self.file_count += 1
        if self.config.mode is OutputMode.LIST:
            yield format_file_entry(path, self.theme)
        else:
            yield from render_file_contents(path, self.highlighter, self.theme)

    def matches_extension(self, name: str) -> bool:
        """Check a file name against the configured extension filter."""
        if self.config.extension is None:
            return True
        extension = file_extension(name)
        logger.debug("extracted file extension: %s", extension)
        return extension == self.config.extension

    def _process_file_safely(self, path: Path) -> Iterator[str]:
        try:
            yield from self.process_file(path)
        except (OSError, SyntaxHighlightingError) as e:
            self.error_count += 1
            logger.error("Error reading file %s: %s", path, e)
