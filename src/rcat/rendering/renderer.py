"""Rendering of the three output modes.

Content mode prints a banner, the file's lines and a footer. List mode prints a
single path announcement. JSON mode serializes a directory tree built by
rcat.file_system_tree. Every function returns or yields ready-to-write strings;
writing them is left to the caller.
"""

import json
import logging
from pathlib import Path
from typing import Iterator, List, Optional

from rcat.file_system_tree.file_system_node import FileSystemNode
from rcat.file_system_tree.tree_builder import to_mapping

from .highlighter import SyntaxHighlighter
from .theme import DEFAULT_THEME, BannerTheme

logger = logging.getLogger(__name__)

RULE_WIDTH = 50
RULE_CHAR = "━"
HEADER_LABEL = "▶ OPENING FILE:"
FOOTER_LABEL = "[ END OF FILE ]"
LIST_LABEL = "📄 File:"


def format_file_header(path: Path, theme: BannerTheme = DEFAULT_THEME) -> str:
    """Format the banner printed before a file's contents."""
    rule = theme.paint(theme.rule, RULE_CHAR * RULE_WIDTH)
    label = theme.paint(theme.header_label, HEADER_LABEL)
    shown_path = theme.paint(theme.path, str(path))
    return f"\n{rule}\n{label}  {shown_path}\n{rule}\n\n"


def format_file_footer(theme: BannerTheme = DEFAULT_THEME) -> str:
    """Format the marker printed after a file's contents."""
    return f"\n{theme.paint(theme.footer, FOOTER_LABEL)}\n\n"


def format_file_entry(path: Path, theme: BannerTheme = DEFAULT_THEME) -> str:
    """Format the path announcement printed in list mode."""
    return f"\n{theme.paint(theme.list_label, LIST_LABEL)} {theme.paint(theme.path, str(path))}\n\n"


def split_lines(text: str) -> List[str]:
    """Split text at ``\\n``, dropping a trailing ``\\r`` from each line.

    A final line terminator does not produce an extra empty line.

    Example:
        >>> split_lines("a\\r\\nb\\n")
        ['a', 'b']
        >>> split_lines("")
        []
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def render_file_contents(
    path: Path,
    highlighter: Optional[SyntaxHighlighter] = None,
    theme: BannerTheme = DEFAULT_THEME,
) -> Iterator[str]:
    """Yield the header, the lines and the footer for one file.

    The file is opened, read completely and closed before any line is yielded.
    Contents that are not valid UTF-8 are printed without highlighting; their
    undecodable bytes are carried as surrogate escapes so a writer encoding with
    ``surrogateescape`` reproduces the file byte for byte.

    Args:
        path: File to render.
        highlighter: Highlighter for the file's lines. None prints lines verbatim.
        theme: Palette for the header and footer.

    Yields:
        Output chunks, each ending with a newline.

    Raises:
        OSError: If the file cannot be opened or read.
        SyntaxHighlightingError: If highlighting fails.
    """
    yield format_file_header(path, theme)

    with open(path, "rb") as f:
        data = f.read()

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        # Undecodable bytes survive as surrogates and are written back unchanged
        text = data.decode("utf-8", errors="surrogateescape")
        if highlighter is not None:
            logger.warning("%s is not valid UTF-8, printing it as plain text", path)
            highlighter = None

    if highlighter is None:
        for line in split_lines(text):
            yield line + "\n"
    else:
        for line in highlighter.highlight_lines(text, path):
            yield line + "\n"

    yield format_file_footer(theme)


def render_tree_json(root: FileSystemNode) -> str:
    """Serialize a directory tree as pretty-printed JSON.

    Args:
        root: Root directory node built by rcat.file_system_tree.build_tree.

    Returns:
        The JSON document followed by a newline.

    Raises:
        TypeError, ValueError: If the structure cannot be serialized.
    """
    return json.dumps(to_mapping(root), indent=2, ensure_ascii=False) + "\n"
