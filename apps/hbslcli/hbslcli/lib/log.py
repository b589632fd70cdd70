"""Logging setup for the CLI."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

DEBUG_ENV = "HBSL_DEBUG"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (--verbose): INFO level - input/output paths, config file used
    - Debug (HBSL_DEBUG=1): DEBUG level - block open/close, comment blocks
    """
    debug = bool(os.environ.get(DEBUG_ENV))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    for name in ("hbsl", "hbslcli"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = [handler]
        logger.propagate = False
