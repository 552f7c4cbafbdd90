"""Minimal logging utilities for latexspans.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from latexspans.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Segmenting document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "latexspans." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'latexspans.mymodule'
    """
    if not (name == "latexspans" or name.startswith("latexspans.")):
        name = f"latexspans.{name}"
    return logging.getLogger(name)
