"""
Guidance tool handlers.

Each handler receives arguments already validated against its schema,
looks up content in the guidance registry and assembles the response:

    **description** -> instructions -> **Example:** (if any) -> **Component:** <verbatim>

The caller's component text is embedded exactly as received.
"""

from ..guidelines import (
    APPLE_DESIGN,
    COMPLETE_UX_GUIDANCE,
    MATERIAL_UI,
    RESPONSIVENESS,
    UX_CHECKLIST,
    GuidanceEntry,
    get_guidance,
    heuristic_key,
)
from ..logging_utils import get_logger
from ..tool_schemas import CapabilityName, resolve_bias_alias
from .decorators import mcp_tool
from .error_helpers import unknown_topic_error
from .types import ToolArgumentsDict, ToolResult
from .utils import success_response

logger = get_logger(__name__)

COMPLETE_UX_CLOSING = "Apply ALL of the guidelines above to the specified component."


def format_guidance(entry: GuidanceEntry, component: str) -> str:
    """Render a guidance entry followed by the echoed component."""
    parts = [f"**{entry.description}**", entry.instructions]
    if entry.example:
        parts.append(f"**Example:**\n{entry.example}")
    parts.append(f"**Component:** {component}")
    return "\n\n".join(parts)


def _apply_topic(tool: CapabilityName, key: str, component: str) -> ToolResult:
    entry = get_guidance(key)
    if entry is None:
        return unknown_topic_error(tool.value, "topic", key)
    return success_response(format_guidance(entry, component))


def get_checklist() -> ToolResult:
    """The fixed UX/UI validation checklist."""
    return success_response(UX_CHECKLIST)


@mcp_tool(CapabilityName.APPLY_RESPONSIVENESS)
async def handle_apply_responsiveness(arguments: ToolArgumentsDict) -> ToolResult:
    """Mobile-first responsiveness guidance"""
    return _apply_topic(CapabilityName.APPLY_RESPONSIVENESS, RESPONSIVENESS, arguments["component"])


@mcp_tool(CapabilityName.APPLY_MATERIAL_UI_BEST_PRACTICES)
async def handle_apply_material_ui_best_practices(arguments: ToolArgumentsDict) -> ToolResult:
    """Material-UI best practices"""
    return _apply_topic(CapabilityName.APPLY_MATERIAL_UI_BEST_PRACTICES, MATERIAL_UI, arguments["component"])


@mcp_tool(CapabilityName.APPLY_APPLE_DESIGN)
async def handle_apply_apple_design(arguments: ToolArgumentsDict) -> ToolResult:
    """Apple design patterns"""
    return _apply_topic(CapabilityName.APPLY_APPLE_DESIGN, APPLE_DESIGN, arguments["component"])


@mcp_tool(CapabilityName.APPLY_NIELSEN_HEURISTIC)
async def handle_apply_nielsen_heuristic(arguments: ToolArgumentsDict) -> ToolResult:
    """
    Guidance for one numbered Nielsen heuristic.

    Numbers 1-10 are all valid arguments, but only some have authored
    content; the rest are reported as unknown topics.
    """
    number = arguments["heuristic"]
    entry = get_guidance(heuristic_key(number))
    if entry is None:
        logger.debug(f"No guidance for heuristic {number}")
        return unknown_topic_error(CapabilityName.APPLY_NIELSEN_HEURISTIC.value, "heuristic", number)
    return success_response(format_guidance(entry, arguments["component"]))


@mcp_tool(CapabilityName.APPLY_COGNITIVE_BIAS)
async def handle_apply_cognitive_bias(arguments: ToolArgumentsDict) -> ToolResult:
    """Guidance for a cognitive bias, addressed by its short code"""
    code = arguments["bias"]
    key = resolve_bias_alias(code)
    entry = get_guidance(key) if key is not None else None
    if entry is None:
        logger.debug(f"No guidance for bias '{code}' (registry key: {key})")
        return unknown_topic_error(CapabilityName.APPLY_COGNITIVE_BIAS.value, "bias", code)
    return success_response(format_guidance(entry, arguments["component"]))


@mcp_tool(CapabilityName.APPLY_COMPLETE_UX)
async def handle_apply_complete_ux(arguments: ToolArgumentsDict) -> ToolResult:
    text = "\n\n".join([
        COMPLETE_UX_GUIDANCE,
        f"**Component:** {arguments['component']}",
        COMPLETE_UX_CLOSING,
    ])
    return success_response(text)


@mcp_tool(CapabilityName.GET_UX_CHECKLIST)
async def handle_get_ux_checklist(arguments: ToolArgumentsDict) -> ToolResult:
    return get_checklist()
