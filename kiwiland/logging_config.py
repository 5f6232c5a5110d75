"""Logging setup for the application entry points.

Library modules only ever call ``logging.getLogger(__name__)``; the
handler is installed once here, on the package logger, by whoever
starts the process.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "kiwiland"


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stdout handler to the package logger.

    Calling it again only updates the level and format.

    Args:
        config: Logging settings (defaults to the application config).

    Returns:
        The configured package logger.
    """
    config = config or get_config().observability
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.level.upper())

    formatter = logging.Formatter(config.format)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setFormatter(formatter)

    return logger
