"""
Common utilities for MCP tool handlers.
"""

import json
import re
from typing import Any, Dict, Optional

from mcp.types import TextContent

from ..logging_utils import get_logger
from ..server_config import get_config
from .types import ErrorKind, ToolResult

logger = get_logger(__name__)


def success_response(*texts: str) -> ToolResult:
    """Build a success envelope with one text item per argument."""
    return ToolResult(content=tuple(TextContent(type="text", text=t) for t in texts))


def error_response(
    message: str,
    details: Optional[Dict[str, Any]] = None,
    recovery: Optional[Dict[str, Any]] = None,
    error_code: Optional[str] = None,
) -> TextContent:
    """
    Create an error text block with optional recovery guidance.

    The block is a JSON object so agents can branch on ``error_code``:

        {"success": false, "error": "...", "error_code": "...", ..., "recovery": {...}}

    Args:
        message: Human-readable error message (length-limited)
        details: Extra top-level fields (e.g. the offending parameter)
        recovery: Suggestions for the calling agent
        error_code: Machine-readable code (an ErrorKind value)
    """
    response: Dict[str, Any] = {
        "success": False,
        "error": _truncate(message),
    }
    if error_code:
        response["error_code"] = error_code
    if details:
        response.update(details)
    if recovery:
        response["recovery"] = recovery

    return TextContent(type="text", text=json.dumps(response, indent=2))


def error_result(
    kind: ErrorKind,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    recovery: Optional[Dict[str, Any]] = None,
) -> ToolResult:
    """Wrap an error block in an error envelope."""
    block = error_response(message, details=details, recovery=recovery, error_code=kind.value)
    return ToolResult(content=(block,), is_error=True, error_kind=kind)


def _truncate(message: str) -> str:
    max_length = get_config().max_error_message_length
    if len(message) > max_length:
        return message[:max_length] + "..."
    return message


def sanitize_error_message(message: str) -> str:
    """
    Strip internal structure from exception text before it reaches a client.

    Removes directory components of file paths, line numbers and traceback
    framing. Only applied to unexpected faults; validation messages carry
    caller-supplied values and are returned as-is.
    """
    if not isinstance(message, str):
        message = str(message)

    message = re.sub(r'Traceback.*?File', 'Error in', message, flags=re.DOTALL)
    message = re.sub(r'File "[^"]+", line \d+', 'Internal error', message)
    message = re.sub(r'/[^\s]+/([^/\s]+\.py)', r'\1', message)
    message = re.sub(r'line \d+', 'line N', message)
    return message
