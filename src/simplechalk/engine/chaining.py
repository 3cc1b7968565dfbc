"""Chaining composition engine.

Every style attribute returns a new callable that carries one more style, so
styles compose to any depth:

    chalk.red("x")                 # red
    chalk.red.bold.underline("x")  # red, then bold, then underline
    chalk("x")                     # no style selected: "x" unchanged

Each access builds a fresh instance around a new immutable chain, so
``warn = chalk.yellow`` can be extended in several directions without the
branches affecting each other.
"""

from simplechalk.config.resolver import resolve_render_context
from simplechalk.lib.ui.renderer import Rendered, render
from simplechalk.models.chain import DirectiveChain
from simplechalk.models.config import ColorSettings, RenderContext
from simplechalk.models.style import StyleName, Surface

_STYLE_NAMES = frozenset(StyleName.values())


class Chalk:
    """Callable styler with one attribute per style name."""

    __slots__ = ("_context", "_chain")

    def __init__(
        self,
        context: RenderContext | None = None,
        chain: DirectiveChain | None = None,
    ) -> None:
        """Create a styler.

        Args:
            context: Resolved rendering decision. None resolves the current
                process signals for the ANSI surface.
            chain: Styles accumulated so far. None starts empty.
        """
        if context is None:
            context = resolve_render_context(surface=Surface.ANSI)
        self._context = context
        self._chain = chain if chain is not None else DirectiveChain.empty()

    @classmethod
    def from_settings(
        cls, settings: ColorSettings, surface: Surface = Surface.ANSI
    ) -> "Chalk":
        """Build an independent styler from explicit ambient signals.

        Args:
            settings: Ambient signal snapshot
            surface: Target surface (ANSI by default, as in terminals)

        Returns:
            Styler with an empty chain.
        """
        return cls(resolve_render_context(settings, surface=surface))

    @property
    def context(self) -> RenderContext:
        return self._context

    @property
    def chain(self) -> DirectiveChain:
        return self._chain

    @property
    def enabled(self) -> bool:
        """Whether this styler applies styles at all."""
        return self._context.enabled

    def __call__(self, text: str) -> Rendered:
        if not self._chain:
            return text
        return render(self._chain, text, self._context)

    def __getattr__(self, name: str) -> "Chalk":
        if name not in _STYLE_NAMES:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return Chalk(self._context, self._chain.extend(name))

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *_STYLE_NAMES})

    def __repr__(self) -> str:
        styles = ".".join(style.value for style in self._chain.styles)
        return f"<Chalk {styles or '(base)'} mode={self._context.mode.value}>"
