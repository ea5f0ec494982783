"""Logging setup."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"
HANDLER_NAME = "flashword-stream"


def setup_logger(
    name: str = "flashword",
    level: Optional[Union[int, str]] = None,
) -> logging.Logger:
    """
    Configure and return the application logger.

    Safe to call repeatedly: the stream handler is attached only once.

    Args:
        name: Logger name (child loggers propagate to it)
        level: Level name or number; INFO when omitted

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)

    return logger
