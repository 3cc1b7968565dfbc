"""Environment resolver deciding whether styling is active.

Resolution order (first match wins):
1. Browser context (window and document globals): enabled unless the
   browser-scoped NO_COLOR global is truthy
2. NO_COLOR or MCP_MODE set: disabled (absolute priority outside browsers)
3. FORCE_COLOR set to a non-empty value: enabled
4. Output stream is a TTY: enabled
5. Otherwise disabled (piped or redirected output)
"""

import logging

from simplechalk.config.defaults import DISABLE_ENV_VARS, FORCE_ENV_VAR
from simplechalk.models.config import ColorSettings, RenderContext
from simplechalk.models.style import Surface

logger = logging.getLogger(__name__)


def explain(settings: ColorSettings) -> tuple[bool, str]:
    """Resolve the enable decision together with the rule that decided it.

    Args:
        settings: Ambient signal snapshot

    Returns:
        Tuple of (enabled, human-readable reason)
    """
    if settings.in_browser:
        if settings.browser_disabled:
            return False, "browser context with NO_COLOR global"
        return True, "browser context"

    for name in DISABLE_ENV_VARS:
        if settings.has_env(name):
            return False, f"{name} is set"

    if settings.env.get(FORCE_ENV_VAR):
        return True, f"{FORCE_ENV_VAR} is set"

    if settings.is_tty:
        return True, "stdout is a TTY"

    return False, "stdout is not a TTY"


def supports_color(settings: ColorSettings | None = None) -> bool:
    """Decide whether styling is enabled.

    Args:
        settings: Ambient signals. None captures the current process signals.

    Returns:
        True if styling should be applied, False for plain text.
    """
    if settings is None:
        settings = ColorSettings.from_environment()
    enabled, _ = explain(settings)
    return enabled


def detect_surface(settings: ColorSettings) -> Surface:
    """Pick the console CSS surface in a browser context, ANSI elsewhere."""
    return Surface.CSS if settings.in_browser else Surface.ANSI


def resolve_render_context(
    settings: ColorSettings | None = None,
    surface: Surface | None = None,
) -> RenderContext:
    """Resolve the rendering decision once.

    Args:
        settings: Ambient signals. None captures the current process signals.
        surface: Force a surface. None detects it from the settings.

    Returns:
        Frozen RenderContext with the surface and the enable decision.
    """
    if settings is None:
        settings = ColorSettings.from_environment()

    enabled, reason = explain(settings)
    resolved_surface = surface if surface is not None else detect_surface(settings)
    context = RenderContext(surface=resolved_surface, enabled=enabled)

    logger.debug(
        f"Styling {'enabled' if enabled else 'disabled'} ({reason}); "
        f"mode={context.mode.value}"
    )
    return context
