"""Default configuration values for simplechalk."""

# Environment variables that force styling off. Presence is enough, even empty.
DISABLE_ENV_VARS: tuple[str, ...] = ("NO_COLOR", "MCP_MODE")

# Environment variable that forces styling on when non-empty, unless disabled above.
FORCE_ENV_VAR = "FORCE_COLOR"

# Globals whose joint presence marks a browser context.
BROWSER_CONTEXT_GLOBALS: tuple[str, ...] = ("window", "document")

# Browser-scoped equivalent of the NO_COLOR environment variable.
BROWSER_DISABLE_GLOBAL = "NO_COLOR"

# Console format marker that applies the next argument as CSS.
TEMPLATE_MARKER = "%c"

# Separator between CSS fragments in a combined declaration.
CSS_SEPARATOR = " "
