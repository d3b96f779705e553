"""ANSI palettes for the banners printed around file output.

Syntax highlighting of file contents is configured separately; these palettes
only style the header, footer and path announcement lines.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BannerTheme:
    """Semantic ANSI palette used by the banner renderers."""

    name: str
    rule: str
    header_label: str
    path: str
    footer: str
    list_label: str
    reset: str

    def paint(self, style: str, text: str) -> str:
        """Wrap ``text`` in ``style`` and a reset, or return it unchanged for an empty style."""
        if not style:
            return text
        return f"{style}{text}{self.reset}"


DEFAULT_THEME = BannerTheme(
    name="default",
    rule="\033[36m",
    header_label="\033[1;33m",
    path="\033[1;32m",
    footer="\033[1;31m",
    list_label="\033[1;34m",
    reset="\033[0m",
)

PLAIN_THEME = BannerTheme(
    name="plain",
    rule="",
    header_label="",
    path="",
    footer="",
    list_label="",
    reset="",
)


def theme_for(no_color: bool) -> BannerTheme:
    """Return the banner palette for a run."""
    return PLAIN_THEME if no_color else DEFAULT_THEME
