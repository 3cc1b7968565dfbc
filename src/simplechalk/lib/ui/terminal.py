"""Terminal and host detection utilities.

Provides the boolean capabilities the environment resolver consumes: whether
stdout is an interactive terminal and, under Pyodide, which browser globals
exist.
"""

import sys
from typing import Any

from simplechalk.config.defaults import BROWSER_CONTEXT_GLOBALS, BROWSER_DISABLE_GLOBAL


def is_tty() -> bool:
    """Check if stdout is connected to a terminal.

    Returns:
        True if stdout is a TTY (interactive terminal), False otherwise.
        A replaced or closed stdout counts as non-interactive.
    """
    stream = sys.stdout
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def browser_globals() -> dict[str, Any] | None:
    """Snapshot the browser globals visible to this interpreter.

    Only a Pyodide interpreter (``sys.platform == "emscripten"``) can see a
    window and document. Everywhere else there is no browser context.

    Returns:
        Mapping of the relevant global names to their values (missing globals
        are omitted), or None outside a browser host.
    """
    if sys.platform != "emscripten":
        return None

    import js  # type: ignore[import-not-found]

    names = (*BROWSER_CONTEXT_GLOBALS, BROWSER_DISABLE_GLOBAL)
    return {
        name: getattr(js, name) for name in names if getattr(js, name, None) is not None
    }
