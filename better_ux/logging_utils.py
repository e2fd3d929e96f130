"""
Logging helpers shared by the server and the tool handlers.

The stdio transport owns stdout, so every handler writes to stderr.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_ROOT_LOGGER_NAME = "better_ux"
_configured = False


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Safe to call more than once; later calls only adjust the level.
    """
    global _configured
    root = logging.getLogger(_ROOT_LOGGER_NAME)

    if level is None:
        from .server_config import get_config
        level = get_config().log_level

    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        _configured = True

    root.setLevel(level.upper())
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace."""
    if name != _ROOT_LOGGER_NAME and not name.startswith(_ROOT_LOGGER_NAME + "."):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
