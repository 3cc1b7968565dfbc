"""Pydantic models for ambient signals and the resolved render context.

ColorSettings is a snapshot of everything the environment resolver reads.
Capturing it as a value lets callers (and tests) build independent styling
instances from explicit signals instead of mutating the process environment.
"""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from simplechalk.config.defaults import (
    BROWSER_CONTEXT_GLOBALS,
    BROWSER_DISABLE_GLOBAL,
    DISABLE_ENV_VARS,
    FORCE_ENV_VAR,
)
from simplechalk.models.style import RenderMode, Surface

SIGNAL_ENV_VARS: tuple[str, ...] = (*DISABLE_ENV_VARS, FORCE_ENV_VAR)


class ColorSettings(BaseModel):
    """Ambient signals that decide whether and how styling is rendered.

    Attributes:
        env: Environment variables (only presence of signal names matters)
        is_tty: Whether the output stream is an interactive terminal
        browser: Browser globals by name, or None outside a browser host
    """

    model_config = ConfigDict(frozen=True)

    env: dict[str, str] = Field(
        default_factory=dict, description="Environment variable snapshot"
    )
    is_tty: bool = Field(False, description="Output stream is interactive")
    browser: dict[str, Any] | None = Field(
        None, description="Browser globals, None outside a browser host"
    )

    @field_validator("env", mode="before")
    @classmethod
    def coerce_env(cls, v: Mapping[str, Any] | None) -> dict[str, str]:
        """Accept any mapping (including os.environ) and stringify values.

        Args:
            v: Mapping of variable names to values, or None

        Returns:
            Plain dict of string names to string values
        """
        if v is None:
            return {}
        return {str(key): str(value) for key, value in dict(v).items()}

    @classmethod
    def from_environment(cls) -> "ColorSettings":
        """Capture the current process signals.

        Returns:
            ColorSettings holding the signal variables present in os.environ,
            the stdout TTY flag, and browser globals when running under Pyodide.
        """
        from simplechalk.lib.ui.terminal import browser_globals, is_tty

        env = {name: os.environ[name] for name in SIGNAL_ENV_VARS if name in os.environ}
        return cls(env=env, is_tty=is_tty(), browser=browser_globals())

    @property
    def in_browser(self) -> bool:
        """Whether both a window-like and a document-like global are present."""
        if self.browser is None:
            return False
        return all(
            self.browser.get(name) is not None for name in BROWSER_CONTEXT_GLOBALS
        )

    @property
    def browser_disabled(self) -> bool:
        """Whether the browser-scoped NO_COLOR global is truthy."""
        if self.browser is None:
            return False
        return bool(self.browser.get(BROWSER_DISABLE_GLOBAL))

    def has_env(self, name: str) -> bool:
        """Whether an environment variable is set (an empty value counts)."""
        return name in self.env


class RenderContext(BaseModel):
    """Resolved rendering decision, fixed for the lifetime of an instance.

    Attributes:
        surface: Target surface (ANSI terminal or browser console CSS)
        enabled: Whether styling is applied at all
    """

    model_config = ConfigDict(frozen=True)

    surface: Surface = Surface.ANSI
    enabled: bool = False

    @property
    def mode(self) -> RenderMode:
        """Effective mode; any surface collapses to plain when disabled."""
        if not self.enabled:
            return RenderMode.PLAIN
        if self.surface is Surface.CSS:
            return RenderMode.BROWSER_CSS
        return RenderMode.ANSI_TERMINAL
