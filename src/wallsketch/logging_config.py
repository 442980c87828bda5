"""
Logging Configuration
Sets up the 'wallsketch' logger used by the snapping, session and history code.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "wallsketch"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream=None,
) -> logging.Logger:
    """
    Attach handlers to the package logger and return it.

    Calling it again replaces the previous handlers, so an embedding
    application can switch level or log file at runtime.

    Args:
        level: Logging level (e.g. logging.DEBUG to see every snap decision).
        log_file: Optional path; the file is truncated on each call.
        stream: Console stream, stdout when omitted.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
