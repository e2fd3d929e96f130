"""
Result types shared by the tool handlers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from mcp.types import CallToolResult, TextContent

# Validated tool arguments (name -> value)
ToolArgumentsDict = Dict[str, Any]


class ErrorKind(str, Enum):
    """Machine-readable error codes carried in error envelopes."""

    UNKNOWN_CAPABILITY = "UNKNOWN_CAPABILITY"
    MISSING_ARGUMENT = "MISSING_ARGUMENT"
    INVALID_ARGUMENT_VALUE = "INVALID_ARGUMENT_VALUE"
    UNKNOWN_TOPIC = "UNKNOWN_TOPIC"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    TIMEOUT = "TIMEOUT"


@dataclass(frozen=True)
class ToolResult:
    """
    Response envelope for a single tool invocation.

    Either a success with one or more content items, or an error with
    exactly one diagnostic item and an error kind. Never both.
    """
    content: Tuple[TextContent, ...]
    is_error: bool = False
    error_kind: Optional[ErrorKind] = None

    @property
    def text(self) -> str:
        """All text content joined (convenience for logging and tests)."""
        return "\n".join(item.text for item in self.content)

    def to_call_tool_result(self) -> CallToolResult:
        return CallToolResult(content=list(self.content), isError=self.is_error)
