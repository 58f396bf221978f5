"""
Logging Configuration
Sets up the logger for the 'matrixmath' namespace.
"""
import logging
import sys
from typing import Optional, Union

from matrixmath import config


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'matrixmath' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, "INFO"). Defaults to
            `config.get_settings().log_level` (MATRIXMATH_LOG_LEVEL).
        log_file: Optional path to save logs to a file.
    """
    if level is None:
        level = config.get_settings().log_level

    # Get the logger for our package
    logger = logging.getLogger("matrixmath")
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs on repeated setup
    if logger.hasHandlers():
        logger.handlers.clear()

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
