"""Enumerations for style names and rendering targets."""

from enum import Enum


class StyleName(str, Enum):
    """Closed set of style names understood by every style table."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    GRAY = "gray"
    GREY = "grey"
    BLUE_BRIGHT = "blueBright"
    BOLD = "bold"
    DIM = "dim"
    UNDERLINE = "underline"

    @classmethod
    def values(cls) -> list[str]:
        """Return the public (attribute) names of every style."""
        return [member.value for member in cls]

    @property
    def is_modifier(self) -> bool:
        """Whether this style is a text modifier rather than a color."""
        return self in _MODIFIERS


_MODIFIERS = frozenset({StyleName.BOLD, StyleName.DIM, StyleName.UNDERLINE})


class Surface(str, Enum):
    """Rendering target for styled output."""

    ANSI = "ansi"
    CSS = "css"


class RenderMode(str, Enum):
    """Effective rendering mode once the enable decision is applied."""

    ANSI_TERMINAL = "ansi-terminal"
    BROWSER_CSS = "browser-css"
    PLAIN = "plain"
