"""Structured output for the browser console surface."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from simplechalk.config.defaults import TEMPLATE_MARKER


@dataclass(frozen=True, eq=False)
class ConsoleMessage:
    """Arguments for a browser ``console.log`` call.

    A styled message carries a ``%c`` template plus the combined CSS
    declaration. An unstyled one carries only the text, so its argument list
    has a single element.

    Instances compare equal to the list (or tuple) of their arguments:
        ConsoleMessage.styled("x", "color: #ff0000;") == ["%cx", "color: #ff0000;"]
        ConsoleMessage.plain("x") == ["x"]

    Attributes:
        template: First console argument (``%c`` + text, or the bare text)
        declaration: CSS declaration, or None when unstyled
    """

    template: str
    declaration: str | None = None

    @classmethod
    def styled(cls, text: str, declaration: str) -> "ConsoleMessage":
        """Build a styled message for text and a combined CSS declaration."""
        return cls(template=f"{TEMPLATE_MARKER}{text}", declaration=declaration)

    @classmethod
    def plain(cls, text: str) -> "ConsoleMessage":
        """Build an unstyled single-argument message."""
        return cls(template=text)

    @property
    def is_styled(self) -> bool:
        """Whether the message carries a CSS declaration."""
        return self.declaration is not None

    @property
    def args(self) -> list[str]:
        """Console arguments in call order."""
        if self.declaration is None:
            return [self.template]
        return [self.template, self.declaration]

    def __iter__(self) -> Iterator[str]:
        return iter(self.args)

    def __len__(self) -> int:
        return len(self.args)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        return self.args[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConsoleMessage):
            return self.args == other.args
        if isinstance(other, Sequence) and not isinstance(other, str):
            return self.args == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self.args))
