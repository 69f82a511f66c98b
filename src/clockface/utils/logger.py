"""Minimal logging utilities for clockface.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from clockface.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering clock")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger under the "clockface." namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("geometry").name
        'clockface.geometry'
        >>> get_logger("clockface.nodes").name
        'clockface.nodes'
    """
    if not (name == "clockface" or name.startswith("clockface.")):
        name = f"clockface.{name}"
    return logging.getLogger(name)
