"""
Better UX MCP Server - Configuration

Static defaults with environment overrides. Built once, read-only afterwards.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .logging_utils import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "BETTER_UX_"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ServerConfig:
    """Process-wide server settings"""

    server_name: str = "better-ux-server"
    server_version: str = "1.0.0"
    log_level: str = "INFO"

    # Per-tool timeout (seconds). Handlers are in-memory lookups, so this
    # only guards against a wedged event loop.
    tool_timeout: float = 30.0

    # Error text returned to clients is truncated past this length
    max_error_message_length: int = 500


def _env(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = environ.get(ENV_PREFIX + key)
    if value is None or not value.strip():
        return None
    return value.strip()


def _positive_number(environ: Mapping[str, str], key: str, default, cast):
    raw = _env(environ, key)
    if raw is None:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning(f"Ignoring {ENV_PREFIX}{key}={raw!r}: not a valid {cast.__name__}")
        return default
    if value <= 0:
        logger.warning(f"Ignoring {ENV_PREFIX}{key}={raw!r}: must be positive")
        return default
    return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """
    Build a ServerConfig from environment variables.

    Recognised variables (all optional):
        BETTER_UX_SERVER_NAME, BETTER_UX_SERVER_VERSION, BETTER_UX_LOG_LEVEL,
        BETTER_UX_TOOL_TIMEOUT, BETTER_UX_MAX_ERROR_MESSAGE_LENGTH
    """
    if environ is None:
        environ = os.environ
    defaults = ServerConfig()

    log_level = (_env(environ, "LOG_LEVEL") or defaults.log_level).upper()
    if log_level not in VALID_LOG_LEVELS:
        logger.warning(f"Ignoring {ENV_PREFIX}LOG_LEVEL={log_level!r}: expected one of {VALID_LOG_LEVELS}")
        log_level = defaults.log_level

    return ServerConfig(
        server_name=_env(environ, "SERVER_NAME") or defaults.server_name,
        server_version=_env(environ, "SERVER_VERSION") or defaults.server_version,
        log_level=log_level,
        tool_timeout=_positive_number(environ, "TOOL_TIMEOUT", defaults.tool_timeout, float),
        max_error_message_length=_positive_number(
            environ, "MAX_ERROR_MESSAGE_LENGTH", defaults.max_error_message_length, int
        ),
    )


_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
