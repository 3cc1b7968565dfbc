"""Value models for style names, chains, settings and console output."""

from simplechalk.models.chain import DirectiveChain
from simplechalk.models.config import ColorSettings, RenderContext
from simplechalk.models.output import ConsoleMessage
from simplechalk.models.style import RenderMode, StyleName, Surface

__all__ = [
    "ColorSettings",
    "ConsoleMessage",
    "DirectiveChain",
    "RenderContext",
    "RenderMode",
    "StyleName",
    "Surface",
]
