"""
Logging configuration for the Social Media Share Dashboard.

Routes the ``share_dashboard`` loggers to stderr through a rich handler.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Configure logging with a rich stderr handler.

    Args:
        verbose: Enable DEBUG level logging
        log_file: Optional file path to append logs to

    Returns:
        The ``share_dashboard`` logger
    """
    level = logging.DEBUG if verbose else logging.INFO

    handlers: list = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(level=logging.WARNING, format="%(message)s", datefmt="[%X]", handlers=handlers)

    logger = logging.getLogger("share_dashboard")
    logger.setLevel(level)
    return logger
