"""Unit tests for banner palettes."""

from rcat.rendering.theme import DEFAULT_THEME, PLAIN_THEME, theme_for


def test_theme_for_no_color():
    assert theme_for(True) is PLAIN_THEME
    assert theme_for(False) is DEFAULT_THEME


def test_paint_with_style():
    assert DEFAULT_THEME.paint(DEFAULT_THEME.path, "a.rs") == "\033[1;32ma.rs\033[0m"


def test_paint_without_style_is_identity():
    assert PLAIN_THEME.paint(PLAIN_THEME.path, "a.rs") == "a.rs"
