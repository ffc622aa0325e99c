"""
Logging configuration for the metrics tools.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from src.main.config import LOG_DATE_FORMAT, LOG_FILE_FORMAT


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging with a rich handler on stderr.

    Args:
        verbose: Enable DEBUG level logging (includes the walker trace)
        quiet: Suppress all but ERROR level logging
        log_file: Optional file path to write logs to

    Returns:
        Logger of the ``src`` package
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_DATE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)

    logger = logging.getLogger("src")
    logger.setLevel(level)
    return logger
