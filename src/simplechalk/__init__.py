"""simplechalk - minimal terminal and browser-console text styling.

Styles text with ANSI escape codes (or CSS directives in a browser console)
while honouring NO_COLOR, MCP_MODE, FORCE_COLOR and TTY detection.

Main features:
- ``chalk``: chainable styler, e.g. ``chalk.red.bold("x")``
- ``chalk_fast``: precompiled styles and common combinations, e.g. ``boldRed``
- ``chalk_browser``: renders console CSS arguments inside a browser host and
  re-checks the environment on every call
- Explicit ColorSettings for building independent instances

``chalk`` and ``chalk_fast`` resolve the environment on first access and keep
that decision for the rest of the process.
"""

from functools import cache
from typing import Any

from simplechalk.config.resolver import resolve_render_context, supports_color
from simplechalk.engine import Chalk, StaticChalk
from simplechalk.lib.errors import ConfigError, SimpleChalkError, UnknownStyleError
from simplechalk.lib.ui.colors import ANSI_TABLE, CSS_TABLE, StyleTable
from simplechalk.lib.ui.renderer import render
from simplechalk.models import (
    ColorSettings,
    ConsoleMessage,
    DirectiveChain,
    RenderContext,
    RenderMode,
    StyleName,
    Surface,
)

__version__ = "0.1.0"


@cache
def _default_chalk() -> Chalk:
    return Chalk()


@cache
def _default_fast() -> StaticChalk:
    return StaticChalk.fast()


@cache
def _default_browser() -> StaticChalk:
    return StaticChalk.browser(dynamic=True)


_DEFAULTS = {
    "chalk": _default_chalk,
    "chalk_fast": _default_fast,
    "chalk_browser": _default_browser,
}


def __getattr__(name: str) -> Any:
    factory = _DEFAULTS.get(name)
    if factory is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return factory()


__all__ = [
    "__version__",
    "ANSI_TABLE",
    "CSS_TABLE",
    "Chalk",
    "ColorSettings",
    "ConfigError",
    "ConsoleMessage",
    "DirectiveChain",
    "RenderContext",
    "RenderMode",
    "SimpleChalkError",
    "StaticChalk",
    "StyleName",
    "StyleTable",
    "Surface",
    "UnknownStyleError",
    "chalk",
    "chalk_browser",
    "chalk_fast",
    "render",
    "resolve_render_context",
    "supports_color",
]
