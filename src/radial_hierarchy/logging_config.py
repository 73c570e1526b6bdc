"""Logger setup for the radial-hierarchy command line."""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "radial_hierarchy"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Path | None = None) -> logging.Logger:
    """Attach handlers to the package logger.

    Records go to stderr so that JSON printed on stdout stays parseable.
    Calling this again replaces the handlers from the previous call.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Optional file that receives the same records.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
