"""Logging setup for hosts embedding textconf."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a console handler to the textconf logger.

    Args:
        level: Log level name or number. Defaults to the configured log_level.

    Returns:
        The configured "textconf" logger.
    """
    if level is None:
        from textconf.settings import get_settings

        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("textconf")
    logger.setLevel(level)

    # Replace any handler from a previous call
    for handler in list(logger.handlers):
        if getattr(handler, "_textconf", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._textconf = True
    logger.addHandler(handler)
    return logger
