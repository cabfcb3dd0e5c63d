"""Console logger setup shared by engines, loaders and tabs."""

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a console-only (cloud friendly) logger for the given module."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Remove any pre-existing handlers to avoid duplicates
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.addHandler(console_handler)
    logger.propagate = False
    return logger
