"""Syntax highlighting of file contents with Pygments.

A whole file is lexed in a single pass so multi-line constructs (block comments,
docstrings) keep their state, and the token stream is then cut at newlines so
every source line is rendered on its own with 24-bit terminal escapes.
"""

import logging
from pathlib import Path
from typing import Any, Iterator, List, Tuple

from pygments import format as format_tokens
from pygments.formatters import TerminalTrueColorFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.util import ClassNotFound

from rcat.exceptions import SyntaxHighlightingError
from rcat.log import TRACE

logger = logging.getLogger(__name__)

# Built-in dark Pygments style used for every highlighted file
HIGHLIGHT_STYLE = "monokai"

TokenLine = List[Tuple[Any, str]]


class SyntaxHighlighter:
    """Renders text files as ANSI-highlighted lines.

    Attributes:
        style: Name of the Pygments style used for all files.

    Example:
        >>> highlighter = SyntaxHighlighter()
        >>> lines = list(highlighter.highlight_lines("x = 1\\n", Path("example.py")))
        >>> len(lines)
        1
        >>> "\\x1b[38;2;" in lines[0]
        True
    """

    def __init__(self, style: str = HIGHLIGHT_STYLE) -> None:
        self.style = style
        self._formatter = TerminalTrueColorFormatter(style=style)

    def lexer_for(self, path: Path) -> Lexer:
        """Pick a lexer from the file name, falling back to plain text."""
        try:
            lexer = get_lexer_for_filename(path.name, stripnl=False)
        except ClassNotFound:
            logger.debug("No syntax definition for %s, using plain text", path)
            return TextLexer(stripnl=False)
        logger.log(TRACE, "Using %s lexer for %s", lexer.name, path)
        return lexer

    def highlight_lines(self, text: str, path: Path) -> Iterator[str]:
        """Yield the highlighted lines of ``text`` without line terminators.

        Trailing whitespace is trimmed from every line before it is escaped. Lines
        end at LF only; CRLF counts as LF and a bare CR stays inside its line.

        Args:
            text: Decoded contents of the file.
            path: Path of the file, used for lexer detection and error context.

        Yields:
            One escaped string per source line.

        Raises:
            SyntaxHighlightingError: If lexing or formatting fails.
        """
        if not text:
            return

        lexer = self.lexer_for(path)
        try:
            # Lexers treat a bare CR as a line break; only LF ends a line here
            text = text.replace("\r\n", "\n")
            if text.endswith("\r"):
                text = text[:-1]
            placeholder = _unused_char(text) if "\r" in text else None
            if placeholder is not None:
                text = text.replace("\r", placeholder)
            for line_tokens in _split_token_lines(lexer.get_tokens(text)):
                line = format_tokens(_rstrip_tokens(line_tokens), self._formatter).rstrip()
                yield line.replace(placeholder, "\r") if placeholder is not None else line
        except Exception as e:
            raise SyntaxHighlightingError(str(path), e) from e


def _unused_char(text: str) -> str:
    for code in range(0xE000, 0xF900):
        if chr(code) not in text:
            return chr(code)
    raise ValueError("no free private-use character to stand in for carriage returns")


def _split_token_lines(tokens: Iterator[Tuple[Any, str]]) -> Iterator[TokenLine]:
    current: TokenLine = []
    for token_type, value in tokens:
        parts = value.split("\n")
        for index, part in enumerate(parts):
            if part:
                current.append((token_type, part))
            if index < len(parts) - 1:
                yield current
                current = []
    if current:
        yield current


def _rstrip_tokens(line: TokenLine) -> TokenLine:
    # Styles color whitespace too, so trailing blanks are removed before escaping
    while line and not line[-1][1].rstrip():
        line.pop()
    if line:
        token_type, value = line[-1]
        line[-1] = (token_type, value.rstrip())
    return line
