"""Logger construction for usha."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from ..presentation.console import console

LOGGER_NAME = "usha"


def make_logger(verbose: bool = False) -> logging.Logger:
    """Return the usha logger, rendering to the stderr console (idempotent)."""
    logger = logging.getLogger(LOGGER_NAME)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=console, show_time=False, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
