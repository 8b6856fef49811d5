"""
Logging configuration using rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def setup_logging(verbose: bool = False) -> None:
    """
    Route deployer log records to stderr through a RichHandler.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("deployer")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
