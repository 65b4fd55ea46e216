"""
Logging configuration module for the tracker.

Provides centralized logging setup with colored output using rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

CATCHERY_LOGGER = "ErrorHandler"


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Sets up logging configuration with rich colored output.

    The interactive loop prints character panels on stdout, so the log
    handler writes on stderr and the default level only lets warnings
    through.

    Args:
        level (int): The logging level to set. Defaults to logging.WARNING.

    """
    console = Console(stderr=True, force_jupyter=False)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )

    # prompt_toolkit runs on asyncio, which logs selector details at debug level.
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    # catchery logs through its "ErrorHandler" logger and gives it a stream
    # handler of its own when it has none; keep only the rich handler above.
    catchery_logger = logging.getLogger(CATCHERY_LOGGER)
    for handler in list(catchery_logger.handlers):
        catchery_logger.removeHandler(handler)
    catchery_logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The configured logger instance.

    """
    return logging.getLogger(name)

