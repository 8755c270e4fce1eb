"""
Logging Configuration
Sets up the package logger for command-line use.
The library itself never configures logging on import.
"""
import logging
import sys
from typing import Optional

from forbildshapes.config import LOGGER_NAME


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'forbildshapes' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated CLI invocations in one process must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    # Diagnostics go to stderr so stdout stays machine-readable JSON
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
