"""Surface renderer turning accumulated styles and text into output.

ANSI surface:
    disabled or no styles -> text
    otherwise             -> directive1 + directive2 + ... + text + RESET

CSS surface (browser console):
    disabled or no styles -> ConsoleMessage(["text"])
    otherwise             -> ConsoleMessage(["%ctext", "frag1 frag2 ..."])
"""

from collections.abc import Callable, Iterable

from simplechalk.config.defaults import CSS_SEPARATOR
from simplechalk.lib.ui.colors import ANSIColors, table_for
from simplechalk.models.chain import DirectiveChain
from simplechalk.models.config import RenderContext
from simplechalk.models.output import ConsoleMessage
from simplechalk.models.style import StyleName, Surface

Rendered = str | ConsoleMessage
Formatter = Callable[[str], Rendered]


def _as_chain(styles: DirectiveChain | Iterable[StyleName | str]) -> DirectiveChain:
    if isinstance(styles, DirectiveChain):
        return styles
    return DirectiveChain.of(*styles)


def render(
    styles: DirectiveChain | Iterable[StyleName | str],
    text: str,
    context: RenderContext,
) -> Rendered:
    """Render text with styles for the context's surface.

    Args:
        styles: Chain (or plain sequence) of style names in accumulation order
        text: Text to style
        context: Resolved surface and enable decision

    Returns:
        A str on the ANSI surface, a ConsoleMessage on the CSS surface.
    """
    chain = _as_chain(styles)
    directives = chain.directives(table_for(context.surface))

    if context.surface is Surface.CSS:
        if not context.enabled or not directives:
            return ConsoleMessage.plain(text)
        return ConsoleMessage.styled(text, CSS_SEPARATOR.join(directives))

    if not context.enabled or not directives:
        return text
    return "".join(directives) + text + ANSIColors.RESET


def compile_formatter(
    styles: DirectiveChain | Iterable[StyleName | str],
    context: RenderContext,
) -> Formatter:
    """Precompute a formatter for a fixed set of styles.

    Directive lookup and joining happen once here, so calling the returned
    function only concatenates strings. Output is identical to render().

    Args:
        styles: Chain (or plain sequence) of style names in accumulation order
        context: Resolved surface and enable decision

    Returns:
        Function mapping text to its rendered form.
    """
    chain = _as_chain(styles)
    directives = chain.directives(table_for(context.surface))
    styled = context.enabled and bool(directives)

    if context.surface is Surface.CSS:
        if not styled:
            return ConsoleMessage.plain
        declaration = CSS_SEPARATOR.join(directives)
        return lambda text: ConsoleMessage.styled(text, declaration)

    if not styled:
        return _identity
    prefix = "".join(directives)
    return lambda text: prefix + text + ANSIColors.RESET


def compile_dynamic_formatter(
    styles: DirectiveChain | Iterable[StyleName | str],
    surface: Surface,
    is_enabled: Callable[[], bool],
) -> Formatter:
    """Precompute a formatter whose enable decision is made on every call.

    Both the styled and the plain formatter are compiled up front; each call
    only asks ``is_enabled`` which one to use.

    Args:
        styles: Chain (or plain sequence) of style names in accumulation order
        surface: Fixed target surface
        is_enabled: Called once per formatted text

    Returns:
        Function mapping text to its rendered form.
    """
    chain = _as_chain(styles)
    styled = compile_formatter(chain, RenderContext(surface=surface, enabled=True))
    plain = compile_formatter(chain, RenderContext(surface=surface, enabled=False))
    return lambda text: styled(text) if is_enabled() else plain(text)


def _identity(text: str) -> str:
    return text
