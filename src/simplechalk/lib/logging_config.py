"""Logging setup for the simplechalk command line.

The library itself only creates module loggers; handlers are configured here
and only by the CLI.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module name."""
    return logging.getLogger(name)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root simplechalk logger.

    Log records go to stderr so they never mix with styled output on stdout.

    Args:
        verbose: Emit DEBUG records
        quiet: Only emit ERROR records (ignored when verbose is set)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger("simplechalk")
    logger.setLevel(level)

    # Replace rather than stack handlers; stderr may have been swapped since.
    for existing in [h for h in logger.handlers if getattr(h, "_simplechalk", False)]:
        logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._simplechalk = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
