"""Static composition engine with pre-enumerated combinations.

Every member is a formatter compiled once at construction, so applying a
style is a plain string concatenation. Only single styles and the listed
combinations exist; anything else is an absent attribute:

    fast = StaticChalk.fast()
    fast.redBold("x")                       # red then bold
    fast.boldRed("x")                       # bold then red
    getattr(fast, "cyanBold", None) is None # not enumerated

The browser variant can also re-read the environment on every call
(``dynamic=True``); surface and directives stay precompiled.
"""

import logging
from collections.abc import Callable, Mapping

from simplechalk.config.resolver import resolve_render_context, supports_color
from simplechalk.lib.errors import ConfigError
from simplechalk.lib.ui.renderer import (
    Formatter,
    compile_dynamic_formatter,
    compile_formatter,
)
from simplechalk.models.config import ColorSettings, RenderContext
from simplechalk.models.style import StyleName, Surface

logger = logging.getLogger(__name__)

S = StyleName

# Combinations for the terminal-focused variant, directives in listed order.
FAST_COMBINATIONS: dict[str, tuple[StyleName, ...]] = {
    "redBold": (S.RED, S.BOLD),
    "greenBold": (S.GREEN, S.BOLD),
    "blueBold": (S.BLUE, S.BOLD),
    "yellowBold": (S.YELLOW, S.BOLD),
    "redUnderline": (S.RED, S.UNDERLINE),
    "greenUnderline": (S.GREEN, S.UNDERLINE),
    "blueUnderline": (S.BLUE, S.UNDERLINE),
    "boldRed": (S.BOLD, S.RED),
    "boldGreen": (S.BOLD, S.GREEN),
    "boldBlue": (S.BOLD, S.BLUE),
    "boldYellow": (S.BOLD, S.YELLOW),
}

# Combinations for the browser-aware variant.
BROWSER_COMBINATIONS: dict[str, tuple[StyleName, ...]] = {
    "redBold": (S.RED, S.BOLD),
    "greenBold": (S.GREEN, S.BOLD),
    "blueBold": (S.BLUE, S.BOLD),
}


class StaticChalk:
    """Callable styler whose members are precompiled formatters."""

    def __init__(
        self,
        context: RenderContext,
        combinations: Mapping[str, tuple[StyleName, ...]] | None = None,
        is_enabled: Callable[[], bool] | None = None,
    ) -> None:
        """Compile a formatter for every single style and combination.

        Args:
            context: Resolved rendering decision
            combinations: Extra members mapping name to styles in order
            is_enabled: Per-call enable check. None fixes the decision to
                ``context.enabled``; otherwise only ``context.surface`` is used.

        Raises:
            ConfigError: If a combination name is not an identifier, shadows a
                style or method, or is empty
        """
        self._context = context
        self._is_enabled = is_enabled

        def _compile(styles: tuple[StyleName, ...]) -> Formatter:
            if is_enabled is None:
                return compile_formatter(styles, context)
            return compile_dynamic_formatter(styles, context.surface, is_enabled)

        members: dict[str, Formatter] = {
            name.value: _compile((name,)) for name in StyleName
        }

        for name, styles in (combinations or {}).items():
            if not name.isidentifier() or name.startswith("_"):
                raise ConfigError(name, "combination name must be a public identifier")
            if name in members or hasattr(type(self), name):
                raise ConfigError(name, "combination name shadows an existing member")
            if not styles:
                raise ConfigError(name, "combination must contain at least one style")
            members[name] = _compile(styles)

        self._members = frozenset(members)
        self.__dict__.update(members)
        logger.debug(
            f"Compiled {len(members)} formatters for mode={self._describe_mode()}"
        )

    @classmethod
    def fast(cls, settings: ColorSettings | None = None) -> "StaticChalk":
        """Terminal variant: ANSI surface with FAST_COMBINATIONS.

        Args:
            settings: Ambient signals. None captures the current process signals.
        """
        context = resolve_render_context(settings, surface=Surface.ANSI)
        return cls(context, FAST_COMBINATIONS)

    @classmethod
    def browser(
        cls,
        settings: ColorSettings | None = None,
        *,
        dynamic: bool = False,
        settings_provider: Callable[[], ColorSettings] = ColorSettings.from_environment,
    ) -> "StaticChalk":
        """Browser-aware variant: detected surface with BROWSER_COMBINATIONS.

        Args:
            settings: Ambient signals used to pick the surface (and, when not
                dynamic, the enable decision). None asks settings_provider.
            dynamic: Re-resolve the enable decision on every call
            settings_provider: Source of fresh signals for each dynamic call
        """
        if settings is None:
            settings = settings_provider()
        context = resolve_render_context(settings)
        if not dynamic:
            return cls(context, BROWSER_COMBINATIONS)
        return cls(
            context,
            BROWSER_COMBINATIONS,
            is_enabled=lambda: supports_color(settings_provider()),
        )

    @property
    def context(self) -> RenderContext:
        return self._context

    @property
    def dynamic(self) -> bool:
        """Whether the enable decision is made on every call."""
        return self._is_enabled is not None

    @property
    def members(self) -> frozenset[str]:
        """Names of every available formatter."""
        return self._members

    def _describe_mode(self) -> str:
        if self.dynamic:
            return f"{self._context.surface.value} (resolved per call)"
        return self._context.mode.value

    def __call__(self, text: str) -> str:
        return text

    def __repr__(self) -> str:
        return (
            f"<StaticChalk members={len(self._members)} "
            f"mode={self._describe_mode()}>"
        )
