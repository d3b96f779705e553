"""Unit tests for SyntaxHighlighter."""

import re
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from pygments.lexers import TextLexer

from rcat.exceptions import SyntaxHighlightingError
from rcat.rendering.highlighter import HIGHLIGHT_STYLE, SyntaxHighlighter

ESCAPE_RE_PREFIX = "\x1b["
# monokai keyword color #66d9ef
KEYWORD_COLOR = "38;2;102;217;239"


@pytest.fixture
def highlighter():
    return SyntaxHighlighter()


def strip_ansi(text):
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


def test_default_style_is_fixed():
    assert SyntaxHighlighter().style == HIGHLIGHT_STYLE == "monokai"


def test_lexer_detected_from_file_name(highlighter):
    assert highlighter.lexer_for(Path("src/main.py")).name == "Python"
    assert highlighter.lexer_for(Path("lib.rs")).name == "Rust"


def test_unknown_extension_falls_back_to_plain_text(highlighter):
    assert isinstance(highlighter.lexer_for(Path("data.unknownext")), TextLexer)
    assert isinstance(highlighter.lexer_for(Path("NO_EXTENSION_FILE")), TextLexer)


def test_one_rendered_line_per_source_line(highlighter):
    text = "fn main() {\n\n    let x = 1;\n}\n"
    lines = list(highlighter.highlight_lines(text, Path("main.rs")))
    assert len(lines) == 4
    assert [strip_ansi(line) for line in lines] == ["fn main() {", "", "    let x = 1;", "}"]


def test_missing_final_newline(highlighter):
    lines = list(highlighter.highlight_lines("a\nb", Path("notes.txt")))
    assert [strip_ansi(line) for line in lines] == ["a", "b"]


def test_leading_blank_lines_are_kept(highlighter):
    lines = list(highlighter.highlight_lines("\n\nx = 1\n", Path("main.py")))
    assert [strip_ansi(line) for line in lines] == ["", "", "x = 1"]


def test_multiline_constructs_keep_lexer_state(highlighter):
    text = 'x = """\nnot code: def\n"""\n'
    lines = list(highlighter.highlight_lines(text, Path("doc.py")))
    # The middle line belongs to the string literal, so "def" is not colored as a keyword
    assert strip_ansi(lines[1]) == "not code: def"
    assert KEYWORD_COLOR not in lines[1]
    assert KEYWORD_COLOR in list(highlighter.highlight_lines("def f(): pass\n", Path("f.py")))[0]


def test_trailing_whitespace_is_trimmed(highlighter):
    lines = list(highlighter.highlight_lines("x = 1   \n\t\n", Path("main.py")))
    assert all(not strip_ansi(line).endswith((" ", "\t")) for line in lines)
    assert strip_ansi(lines[1]) == ""


def test_true_color_escapes(highlighter):
    (line,) = highlighter.highlight_lines("import os\n", Path("main.py"))
    assert "\x1b[38;2;" in line
    assert line.startswith(ESCAPE_RE_PREFIX)


def test_empty_text_yields_nothing(highlighter):
    assert list(highlighter.highlight_lines("", Path("empty.py"))) == []


def test_engine_failure_is_wrapped_with_path(highlighter):
    lexer = MagicMock()
    lexer.get_tokens.side_effect = ValueError("unexpected state")

    with patch.object(SyntaxHighlighter, "lexer_for", return_value=lexer):
        with pytest.raises(SyntaxHighlightingError) as exc_info:
            list(highlighter.highlight_lines("x\n", Path("src/bad.py")))

    assert exc_info.value.path == str(Path("src/bad.py"))
    assert isinstance(exc_info.value.cause, ValueError)
    assert "src/bad.py" in str(exc_info.value)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a\rb\n", ["a\rb"]),
        ("x = 1\r\ny = 2\r\n", ["x = 1", "y = 2"]),
        ("first\r", ["first"]),
    ],
)
def test_only_line_feeds_end_lines(highlighter, text, expected):
    lines = list(highlighter.highlight_lines(text, Path("notes.txt")))
    assert [strip_ansi(line) for line in lines] == expected


def test_bare_carriage_return_in_source_code(highlighter):
    lines = list(highlighter.highlight_lines("x = 1\ry = 2\nz = 3\n", Path("main.py")))
    assert len(lines) == 2
    assert "\r" in lines[0]
    assert "\ue000" not in lines[0]
