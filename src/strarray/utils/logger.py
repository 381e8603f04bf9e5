"""Minimal logging utilities for strarray.

Wraps the standard library logging; the library never installs handlers.

Example:
    >>> from strarray.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("grew storage to %d slots", 32)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, under the "strarray." namespace.

    Example:
        >>> get_logger("mymodule").name
        'strarray.mymodule'
        >>> get_logger("strarray.array").name
        'strarray.array'
    """
    if not (name == "strarray" or name.startswith("strarray.")):
        name = f"strarray.{name}"
    return logging.getLogger(name)
