"""Minimal logging utilities for lumenmark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from lumenmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Dropping table without data rows")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lumenmark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'lumenmark.mymodule'
    """
    if not (name == "lumenmark" or name.startswith("lumenmark.")):
        name = f"lumenmark.{name}"
    return logging.getLogger(name)
