"""
Logging setup for minilog's own diagnostics.

Configuration loading and errors are reported through the standard library
``logging`` module, never through the Logger class this package provides.
"""

import logging
import os

LOGGER_NAME = "minilog"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging():
    """
    Configure the ``minilog`` diagnostics logger.

    The level comes from the LOG_LEVEL environment variable (default WARNING).
    Calling it again only refreshes the level.

    Returns:
        logging.Logger: Configured logger instance
    """
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level, logging.WARNING))

    if not any(getattr(h, "_minilog_console", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._minilog_console = True
        logger.addHandler(console_handler)

    return logger
