"""
Logging setup for goalscope.

Every module takes a child of the "goalscope" logger through `get_logger`.
The first call attaches a stderr handler to that package logger; the CLI
can change the level afterwards with `set_log_level`.
"""

import logging
from typing import Optional, Union

from goalscope.config import LOG_FORMAT, LOG_LEVEL

PACKAGE_LOGGER = "goalscope"


def _configure_package_logger() -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(LOG_LEVEL)
    return package_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger inside the goalscope namespace.

    Module names such as "goalscope.features.cleaning" are used as-is; any
    other name is nested under "goalscope".
    """
    _configure_package_logger()
    if name is None or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every goalscope logger, e.g. "DEBUG" or logging.WARNING."""
    if isinstance(level, str):
        level = level.upper()
    _configure_package_logger().setLevel(level)
