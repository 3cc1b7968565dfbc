"""UI utilities for styled output.

This module provides:
- TTY and browser host detection
- Style tables for the ANSI and CSS surfaces
- The surface renderer
"""

from simplechalk.lib.ui.colors import (
    ANSI_TABLE,
    CSS_TABLE,
    ANSIColors,
    CSSStyles,
    StyleTable,
    table_for,
)
from simplechalk.lib.ui.renderer import compile_formatter, render
from simplechalk.lib.ui.terminal import browser_globals, is_tty

__all__ = [
    "ANSI_TABLE",
    "ANSIColors",
    "CSS_TABLE",
    "CSSStyles",
    "StyleTable",
    "browser_globals",
    "compile_formatter",
    "is_tty",
    "render",
    "table_for",
]
