"""Composition engines: unbounded chaining and precompiled combinations."""

from simplechalk.engine.chaining import Chalk
from simplechalk.engine.static import (
    BROWSER_COMBINATIONS,
    FAST_COMBINATIONS,
    StaticChalk,
)

__all__ = [
    "BROWSER_COMBINATIONS",
    "Chalk",
    "FAST_COMBINATIONS",
    "StaticChalk",
]
