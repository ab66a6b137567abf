"""Logging setup for the applypatch package.

Library modules only ever call ``logging.getLogger(__name__)``; nothing is
emitted until an application calls :func:`setup_logging`.
"""

import logging
from typing import TextIO

LOGGER_NAME = "applypatch"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Attach a stream handler to the ``applypatch`` logger.

    Calling this again replaces the handler installed by the previous call
    instead of stacking a second one.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None and _handler in logger.handlers:
        logger.removeHandler(_handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    _handler = handler
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
