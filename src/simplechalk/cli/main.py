"""Command line interface for simplechalk.

Implements 'simplechalk paint' for styling text from the shell and
'simplechalk doctor' for showing how the environment was resolved.
"""

import sys

import click

from simplechalk.config.defaults import DISABLE_ENV_VARS, FORCE_ENV_VAR
from simplechalk.config.resolver import explain, resolve_render_context
from simplechalk.engine.chaining import Chalk
from simplechalk.lib.errors import UnknownStyleError
from simplechalk.lib.logging_config import get_logger, setup_logging
from simplechalk.lib.ui.colors import ANSI_TABLE
from simplechalk.models.config import ColorSettings
from simplechalk.models.output import ConsoleMessage
from simplechalk.models.style import Surface

logger = get_logger(__name__)

SURFACE_CHOICES = {"auto": None, "ansi": Surface.ANSI, "css": Surface.CSS}


@click.group()
@click.version_option(package_name="simplechalk")
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Enable debug logging on stderr",
)
def main(debug: bool) -> None:
    """Style text with terminal colors, honouring NO_COLOR and FORCE_COLOR."""
    setup_logging(verbose=debug, quiet=not debug)


@main.command()
@click.argument("styles", nargs=-1, required=True)
@click.option("--text", "-t", required=True, help="Text to style")
@click.option(
    "--surface",
    type=click.Choice(sorted(SURFACE_CHOICES)),
    default="ansi",
    help="Render surface (default: ansi; auto detects a browser host)",
)
def paint(styles: tuple[str, ...], text: str, surface: str) -> None:
    """Apply STYLES in order to --text and print the result.

    Example:

        simplechalk paint red bold --text "Build failed"

        FORCE_COLOR=1 simplechalk paint cyan underline -t docs | less -R

    The css surface prints the console arguments one per line.
    """
    try:
        for name in styles:
            ANSI_TABLE.lookup(name)
    except UnknownStyleError as e:
        logger.debug(f"Rejected style list {styles!r}: {e}")
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    settings = ColorSettings.from_environment()
    context = resolve_render_context(settings, surface=SURFACE_CHOICES[surface])

    styler = Chalk(context)
    for name in styles:
        styler = getattr(styler, name)

    result = styler(text)
    if isinstance(result, ConsoleMessage):
        for arg in result.args:
            click.echo(arg)
    else:
        click.echo(result, color=context.enabled)


@main.command()
def doctor() -> None:
    """Show the ambient signals and the resulting styling decision."""
    settings = ColorSettings.from_environment()
    enabled, reason = explain(settings)
    context = resolve_render_context(settings)

    for name in (*DISABLE_ENV_VARS, FORCE_ENV_VAR):
        state = f"set ({settings.env[name]!r})" if settings.has_env(name) else "unset"
        click.echo(f"{name}: {state}")
    click.echo(f"tty: {'yes' if settings.is_tty else 'no'}")
    click.echo(f"browser: {'yes' if settings.in_browser else 'no'}")
    click.echo(f"enabled: {'yes' if enabled else 'no'} ({reason})")
    click.echo(f"mode: {context.mode.value}")


if __name__ == "__main__":
    main()
