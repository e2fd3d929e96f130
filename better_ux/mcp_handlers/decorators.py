"""
MCP Tool Decorators - Registration and fault boundary

Handlers are registered against a CapabilityName, so a handler can only
exist for a name that is in the catalog.
"""

import asyncio
import time
from dataclasses import dataclass
from functools import wraps
from typing import Awaitable, Callable, Dict, Optional

from ..logging_utils import get_logger
from ..server_config import get_config
from ..tool_schemas import CapabilityName
from .error_helpers import system_error, timeout_error
from .types import ToolArgumentsDict, ToolResult

logger = get_logger(__name__)

ToolHandler = Callable[[ToolArgumentsDict], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool handler."""
    name: CapabilityName
    handler: ToolHandler
    timeout: Optional[float] = None


_TOOL_DEFINITIONS: Dict[CapabilityName, ToolDefinition] = {}


def mcp_tool(name: CapabilityName, timeout: Optional[float] = None):
    """
    Decorator for tool handlers with registration and timeout protection.

    Provides:
    - Registration under a catalog name (duplicates are rejected)
    - Timeout protection (defaults to the configured tool timeout)
    - Conversion of any unexpected exception into an INTERNAL_ERROR envelope

    Usage:
        @mcp_tool(CapabilityName.GET_UX_CHECKLIST)
        async def handle_get_ux_checklist(arguments: ToolArgumentsDict) -> ToolResult:
            ...
    """
    if not isinstance(name, CapabilityName):
        raise TypeError(f"mcp_tool expects a CapabilityName, got {name!r}")

    def decorator(func: ToolHandler) -> ToolHandler:
        if name in _TOOL_DEFINITIONS:
            raise ValueError(f"Duplicate handler registered for tool '{name.value}'")

        tool_name = name.value

        @wraps(func)
        async def wrapper(arguments: ToolArgumentsDict) -> ToolResult:
            limit = timeout if timeout is not None else get_config().tool_timeout
            start_time = time.perf_counter()
            try:
                result = await asyncio.wait_for(func(arguments), timeout=limit)
            except asyncio.TimeoutError:
                logger.warning(f"Tool '{tool_name}' timed out after {limit}s")
                return timeout_error(tool_name, limit)
            except Exception as e:
                logger.error(f"Tool '{tool_name}' error: {e}", exc_info=True)
                return system_error(tool_name, e)

            elapsed = time.perf_counter() - start_time
            if elapsed > limit * 0.8:
                logger.warning(
                    f"Tool '{tool_name}' took {elapsed:.2f}s "
                    f"({elapsed / limit * 100:.1f}% of {limit}s timeout)"
                )
            return result

        _TOOL_DEFINITIONS[name] = ToolDefinition(name=name, handler=wrapper, timeout=timeout)
        return wrapper

    return decorator


def get_tool_registry() -> Dict[CapabilityName, ToolHandler]:
    """Get the registered tool handlers."""
    return {name: td.handler for name, td in _TOOL_DEFINITIONS.items()}


def get_tool_definition(name: CapabilityName) -> Optional[ToolDefinition]:
    return _TOOL_DEFINITIONS.get(name)


def get_tool_timeout(name: CapabilityName) -> float:
    """Effective timeout for a tool."""
    td = _TOOL_DEFINITIONS.get(name)
    if td is not None and td.timeout is not None:
        return td.timeout
    return get_config().tool_timeout


def check_registry_complete() -> None:
    """
    Ensure every catalog name has exactly one handler.

    Raises:
        RuntimeError: listing the tools with no handler
    """
    missing = [n.value for n in CapabilityName if n not in _TOOL_DEFINITIONS]
    if missing:
        raise RuntimeError(f"No handler registered for tools: {missing}")
