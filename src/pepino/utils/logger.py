"""Minimal logging utilities for Pepino.

Every Pepino logger lives under the "pepino" namespace, so one call
configures them all. The line lexer logs dropped preamble lines at DEBUG
and, with a non-strict LexConfig, skipped invalid lines at WARNING.

Example:
    >>> import logging
    >>> logging.basicConfig()
    >>> logging.getLogger("pepino").setLevel(logging.DEBUG)
    >>> tokens = tokenize("Feature: Login\\nScenario: s")  # logs the skipped title
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pepino." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'pepino.mymodule'
    """
    if not (name == "pepino" or name.startswith("pepino.")):
        name = f"pepino.{name}"
    return logging.getLogger(name)
