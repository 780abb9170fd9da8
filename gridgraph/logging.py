"""Package logger for gridgraph.

Every module obtains its logger through `get_logger`. Module loggers stay at
NOTSET, so the level set on the ``gridgraph`` logger applies to all of them
and records propagate to the Python root logger.
"""

import logging
import sys

PACKAGE_LOGGER_NAME = "gridgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _package_logger() -> logging.Logger:
    """Return the ``gridgraph`` logger, attaching a stdout handler once."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name`` under the package logger."""
    _package_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_log_level(level: int) -> None:
    """Set the level of every gridgraph logger, e.g. ``logging.DEBUG``."""
    _package_logger().setLevel(level)
