"""Logging configuration for pinmodel.

Modules call ``get_logger(__name__)`` at import time. Nothing is attached to
the root logger until an application calls ``setup_logging``.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str | Path] = None,
    rich_output: bool = True,
) -> None:
    """
    Configure logging for the pinmodel package.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path to a log file
        rich_output: Use a rich console handler instead of a plain stream handler
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    package_logger = logging.getLogger("pinmodel")
    package_logger.setLevel(level)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    if rich_output:
        console_handler: logging.Handler = RichHandler(
            rich_tracebacks=True, show_time=True, show_level=True, show_path=False
        )
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    console_handler.setLevel(level)
    package_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        file_handler.setLevel(level)
        package_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
