"""Output rendering for the content, list and JSON modes."""

from .highlighter import HIGHLIGHT_STYLE, SyntaxHighlighter
from .renderer import (
    format_file_entry,
    format_file_footer,
    format_file_header,
    render_file_contents,
    render_tree_json,
    split_lines,
)
from .theme import DEFAULT_THEME, PLAIN_THEME, BannerTheme, theme_for

__all__ = [
    "BannerTheme",
    "DEFAULT_THEME",
    "HIGHLIGHT_STYLE",
    "PLAIN_THEME",
    "SyntaxHighlighter",
    "format_file_entry",
    "format_file_footer",
    "format_file_header",
    "render_file_contents",
    "render_tree_json",
    "split_lines",
    "theme_for",
]
