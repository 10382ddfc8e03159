"""
Logging Configuration
Sets up the package logger for command line use.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
configure handlers themselves; applications (and the globecoord CLI) call
setup_logging once at startup.
"""
import logging
from typing import Optional

from rich.logging import RichHandler

PACKAGE_LOGGER = "globecoord"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'globecoord' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Drop handlers from a previous call so records are not duplicated
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = RichHandler(level=level, show_path=False, rich_tracebacks=True)
    console_handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="%H:%M:%S"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
