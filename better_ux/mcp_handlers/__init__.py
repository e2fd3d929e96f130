"""
MCP Tool Handlers

Handler registry and dispatch. Each tool is a separate decorated handler;
dispatch resolves the name against the closed catalog, validates the
arguments and calls the handler.
"""

from typing import Any, Dict, Mapping, Optional

from ..logging_utils import get_logger
from ..tool_schemas import CAPABILITIES, Capability, CapabilityName, get_capability

# Importing the handler modules registers their tools
from .guidance import get_checklist  # noqa: F401

from .decorators import ToolHandler, check_registry_complete, get_tool_registry
from .error_helpers import unknown_capability_error
from .types import ErrorKind, ToolResult  # noqa: F401
from .validators import validate_arguments

# Every catalog name must have a handler; fail at import rather than at call time
check_registry_complete()

TOOL_HANDLERS: Mapping[CapabilityName, ToolHandler] = get_tool_registry()

_logger = get_logger(__name__)


def list_capabilities() -> tuple[Capability, ...]:
    """The full catalog in declaration order."""
    return CAPABILITIES


async def dispatch_tool(name: Any, arguments: Optional[Dict[str, Any]]) -> ToolResult:
    """
    Dispatch a tool call to its handler.

    Steps: resolve the name, validate arguments against the schema, then
    call the handler. Every failure comes back as an error envelope; the
    handler is never called with invalid arguments.

    Args:
        name: Tool name
        arguments: Tool arguments (None is treated as empty)

    Returns:
        ToolResult envelope (success or error)
    """
    capability = get_capability(name)
    if capability is None:
        _logger.info(f"Unknown tool requested: {name!r}")
        return unknown_capability_error(name, [c.name.value for c in CAPABILITIES])

    validated, error = validate_arguments(capability, arguments)
    if error is not None:
        _logger.debug(f"Rejected call to '{capability.name.value}': {error.error_kind.value}")
        return error

    _logger.debug(f"Dispatching '{capability.name.value}'")
    handler = TOOL_HANDLERS[capability.name]
    return await handler(validated)
