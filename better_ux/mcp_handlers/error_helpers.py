"""
Standard error envelopes for tool handlers.

Every request-scoped failure goes through one of these helpers so clients
always see the same shape: a single JSON text block with ``error_code``
and recovery guidance.
"""

import difflib
from typing import Any, Optional, Sequence

from .types import ErrorKind, ToolResult
from .utils import error_result, sanitize_error_message


RECOVERY_PATTERNS = {
    "unknown_capability": {
        "action": "Use list_tools to see the available tools",
        "related_tools": ["get_ux_checklist"],
        "workflow": [
            "1. Check the tool name spelling",
            "2. List the available tools",
            "3. Retry with an exact tool name",
        ],
    },
    "missing_argument": {
        "action": "Provide every required parameter",
        "related_tools": [],
        "workflow": [
            "1. Check the tool's inputSchema 'required' list",
            "2. Add the missing parameter",
            "3. Retry the tool call",
        ],
    },
    "invalid_argument_value": {
        "action": "Use one of the values declared in the tool's schema",
        "related_tools": [],
        "workflow": [
            "1. Check the parameter's 'enum' in the tool's inputSchema",
            "2. Retry with an exact value (values are case-sensitive)",
        ],
    },
    "unknown_topic": {
        "action": "No guidance is available for this topic yet; choose another",
        "related_tools": ["apply_complete_ux", "get_ux_checklist"],
        "workflow": [
            "1. Try a different heuristic or bias",
            "2. Or use apply_complete_ux for the full guideline set",
        ],
    },
    "system_error": {
        "action": "Retry the request; if it keeps failing, restart the server",
        "related_tools": ["get_ux_checklist"],
        "workflow": [
            "1. Wait a few seconds",
            "2. Retry request",
        ],
    },
    "timeout": {
        "action": "Retry the request",
        "related_tools": [],
        "workflow": [
            "1. Wait a few seconds and retry",
            "2. Restart the server if the timeout persists",
        ],
    },
}


def unknown_capability_error(tool_name: Any, available_tools: Sequence[str]) -> ToolResult:
    """
    Error for a tool name that is not in the catalog.

    Close matches are offered as suggestions only; the request is never
    re-routed to them.
    """
    similar = []
    if isinstance(tool_name, str):
        similar = difflib.get_close_matches(tool_name, list(available_tools), n=3, cutoff=0.4)

    message = f"Unknown tool: '{tool_name}'"
    if similar:
        message += f". Did you mean: {', '.join(repr(s) for s in similar)}?"

    recovery = dict(RECOVERY_PATTERNS["unknown_capability"])
    recovery["suggestions"] = similar
    recovery["available_tools"] = list(available_tools)

    return error_result(
        ErrorKind.UNKNOWN_CAPABILITY,
        message,
        details={"requested_tool": str(tool_name)},
        recovery=recovery,
    )


def missing_argument_error(tool_name: str, param_name: str) -> ToolResult:
    """Error for a required parameter that was not supplied."""
    return error_result(
        ErrorKind.MISSING_ARGUMENT,
        f"Missing required parameter '{param_name}' for tool '{tool_name}'",
        details={"tool_name": tool_name, "param_name": param_name},
        recovery=RECOVERY_PATTERNS["missing_argument"],
    )


def invalid_argument_value_error(
    tool_name: str,
    param_name: str,
    provided_value: Any,
    valid_values: Optional[Sequence[str]] = None,
    reason: Optional[str] = None,
) -> ToolResult:
    """Error for a supplied value outside the declared type or enumeration."""
    if reason is None:
        reason = f"must be one of {list(valid_values or [])}"
    message = f"Invalid value {provided_value!r} for parameter '{param_name}' of tool '{tool_name}': {reason}"

    details = {
        "tool_name": tool_name,
        "param_name": param_name,
        "provided_value": provided_value if isinstance(provided_value, str) else repr(provided_value),
    }
    if valid_values is not None:
        details["valid_values"] = list(valid_values)

    return error_result(
        ErrorKind.INVALID_ARGUMENT_VALUE,
        message,
        details=details,
        recovery=RECOVERY_PATTERNS["invalid_argument_value"],
    )


def unknown_topic_error(tool_name: str, param_name: str, value: str) -> ToolResult:
    """Error for a valid argument value that has no guidance content."""
    return error_result(
        ErrorKind.UNKNOWN_TOPIC,
        f"No guidance found for {param_name} '{value}'",
        details={"tool_name": tool_name, "param_name": param_name, "topic": value},
        recovery=RECOVERY_PATTERNS["unknown_topic"],
    )


def system_error(tool_name: str, error: Exception) -> ToolResult:
    """Generic envelope for an unexpected fault inside a handler."""
    return error_result(
        ErrorKind.INTERNAL_ERROR,
        f"Error executing tool '{tool_name}': {sanitize_error_message(str(error))}",
        details={"tool_name": tool_name, "exception_type": type(error).__name__},
        recovery=RECOVERY_PATTERNS["system_error"],
    )


def timeout_error(tool_name: str, timeout: float) -> ToolResult:
    """Error for a handler that exceeded its timeout."""
    return error_result(
        ErrorKind.TIMEOUT,
        f"Tool '{tool_name}' timed out after {timeout} seconds.",
        details={"tool_name": tool_name, "timeout_seconds": timeout},
        recovery=RECOVERY_PATTERNS["timeout"],
    )
