"""Terminal text styling backed by rich.

Styles form a closed set: every ``Style`` member maps to a rich style through
``STYLE_TABLE``, so an unknown style name cannot reach the renderer.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from rich.color import ColorSystem
from rich.style import Style as RichStyle
from rich.text import Text


class Style(str, Enum):
    """Text presentation variants understood by ``StyleRenderer``."""

    BOLD = "bold"
    DIM = "dim"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    INVERSE = "inverse"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    GRAY = "gray"


STYLE_TABLE: dict[Style, RichStyle] = {
    Style.BOLD: RichStyle(bold=True),
    Style.DIM: RichStyle(dim=True),
    Style.ITALIC: RichStyle(italic=True),
    Style.UNDERLINE: RichStyle(underline=True),
    Style.STRIKETHROUGH: RichStyle(strike=True),
    Style.INVERSE: RichStyle(reverse=True),
    Style.BLACK: RichStyle(color="black"),
    Style.RED: RichStyle(color="red"),
    Style.GREEN: RichStyle(color="green"),
    Style.YELLOW: RichStyle(color="yellow"),
    Style.BLUE: RichStyle(color="blue"),
    Style.MAGENTA: RichStyle(color="magenta"),
    Style.CYAN: RichStyle(color="cyan"),
    Style.WHITE: RichStyle(color="white"),
    Style.GRAY: RichStyle(color="bright_black"),
}


def to_style(value: Style | str) -> Style:
    """Coerce a style name (``"red"``) or member to a ``Style``."""

    if isinstance(value, Style):
        return value
    return Style(value.lower())


class StyleRenderer:
    """Apply ``Style`` members to strings as ANSI escape sequences."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def compose(self, styles: Iterable[Style | str]) -> RichStyle:
        """Combine styles left to right; later colors win over earlier ones."""

        return RichStyle.chain(*(STYLE_TABLE[to_style(s)] for s in styles))

    def apply(self, text: str, *styles: Style | str) -> str:
        """Style ``text``. Unknown style names raise ``ValueError`` even when disabled."""

        resolved = [to_style(s) for s in styles]
        if not self.enabled or not resolved:
            return text
        return self.compose(resolved).render(text, color_system=ColorSystem.STANDARD)


def strip_styles(text: str) -> str:
    """Return ``text`` with ANSI escape sequences removed."""

    return Text.from_ansi(text).plain
