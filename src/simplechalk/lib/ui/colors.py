"""Style tables mapping style names to per-surface directives.

Two tables cover the same closed set of names: one holds ANSI escape codes for
terminals, the other holds CSS fragments for the browser console. ``grey`` is an
alias of ``gray``, and ``blueBright`` renders as ``cyan`` on both surfaces.
"""

from collections.abc import Mapping

from simplechalk.lib.errors import UnknownStyleError
from simplechalk.models.style import StyleName, Surface


class ANSIColors:
    """ANSI escape codes for terminal output.

    Attributes:
        RESET: Reset code restoring default terminal attributes
        BOLD, DIM, UNDERLINE: Text modifiers
        BLACK ... WHITE: Standard foreground colors (30-37)
        GRAY: Bright black foreground (90)
    """

    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    UNDERLINE = "\x1b[4m"

    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    GRAY = "\x1b[90m"


class CSSStyles:
    """CSS declaration fragments for browser console output."""

    BOLD = "font-weight: bold;"
    DIM = "opacity: 0.5;"
    UNDERLINE = "text-decoration: underline;"

    BLACK = "color: #000000;"
    RED = "color: #ff0000;"
    GREEN = "color: #00ff00;"
    YELLOW = "color: #ffff00;"
    BLUE = "color: #0000ff;"
    MAGENTA = "color: #ff00ff;"
    CYAN = "color: #00ffff;"
    WHITE = "color: #ffffff;"
    GRAY = "color: #808080;"


# Names whose directive is borrowed from another entry.
STYLE_ALIASES: dict[StyleName, StyleName] = {
    StyleName.GREY: StyleName.GRAY,
    StyleName.BLUE_BRIGHT: StyleName.CYAN,
}


def _build(source: type) -> dict[StyleName, str]:
    table: dict[StyleName, str] = {}
    for name in StyleName:
        target = STYLE_ALIASES.get(name, name)
        table[name] = getattr(source, target.name)
    return table


class StyleTable:
    """Fixed mapping from style name to directive for one surface.

    Attributes:
        surface: Surface this table renders for
    """

    def __init__(self, surface: Surface, directives: Mapping[StyleName, str]) -> None:
        """Create a table over the full closed set of style names.

        Args:
            surface: Surface the directives belong to
            directives: Directive for every StyleName

        Raises:
            ValueError: If any style name has no directive
        """
        missing = [name.value for name in StyleName if name not in directives]
        if missing:
            raise ValueError(
                f"{surface.value} table is missing styles: {', '.join(missing)}"
            )
        self.surface = surface
        self._directives = dict(directives)

    def lookup(self, name: StyleName | str) -> str:
        """Return the directive for a style name.

        Args:
            name: StyleName or its public string value (e.g. "blueBright")

        Returns:
            The escape code or CSS fragment for the style.

        Raises:
            UnknownStyleError: If the name is outside the closed set
        """
        try:
            key = StyleName(name)
        except ValueError:
            raise UnknownStyleError(str(name), StyleName.values()) from None
        return self._directives[key]

    def __contains__(self, name: object) -> bool:
        return name in StyleName.values()

    def __repr__(self) -> str:
        return f"StyleTable(surface={self.surface.value!r})"


ANSI_TABLE = StyleTable(Surface.ANSI, _build(ANSIColors))
CSS_TABLE = StyleTable(Surface.CSS, _build(CSSStyles))


def table_for(surface: Surface) -> StyleTable:
    """Return the style table for a surface."""
    return CSS_TABLE if surface is Surface.CSS else ANSI_TABLE
