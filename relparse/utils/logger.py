"""
Logging utilities for relparse.

relparse is a library and never configures logging itself. Every logger
handed out here lives under the ``relparse`` namespace and is silenced by a
:class:`logging.NullHandler` until the host application attaches handlers.
"""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER_NAME = "relparse"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the relparse namespace.

    Args:
        name: Logger name. Use ``__name__`` for module-relative naming.

    Returns:
        A logger instance under the ``relparse`` hierarchy.
    """
    if not name or name == ROOT_LOGGER_NAME:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
    elif name.startswith(f"{ROOT_LOGGER_NAME}."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())

    return logger
