"""Immutable chain of accumulated style directives."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from simplechalk.models.style import StyleName

if TYPE_CHECKING:
    from simplechalk.lib.ui.colors import StyleTable


class DirectiveChain(BaseModel):
    """Ordered, immutable sequence of style names.

    Each chaining step produces a new chain, so two branches extended from the
    same base never see each other's styles:
        base = DirectiveChain.empty()
        red = base.extend(StyleName.RED)
        red_bold = red.extend(StyleName.BOLD)  # red is unchanged
    """

    model_config = ConfigDict(frozen=True)

    styles: tuple[StyleName, ...] = ()

    @classmethod
    def empty(cls) -> "DirectiveChain":
        """Create a chain with no styles."""
        return cls()

    @classmethod
    def of(cls, *names: StyleName | str) -> "DirectiveChain":
        """Create a chain from style names in accumulation order."""
        return cls(styles=tuple(StyleName(name) for name in names))

    def extend(self, name: StyleName | str) -> "DirectiveChain":
        """Return a new chain with one more style appended.

        Args:
            name: Style to append; repeats are allowed.

        Returns:
            New DirectiveChain; this instance is not modified.
        """
        return DirectiveChain(styles=(*self.styles, StyleName(name)))

    def directives(self, table: "StyleTable") -> list[str]:
        """Resolve every style through a table, preserving order."""
        return [table.lookup(name) for name in self.styles]

    def __len__(self) -> int:
        return len(self.styles)

    def __bool__(self) -> bool:
        return bool(self.styles)
