"""
Parameter validation for MCP tool handlers.

Arguments are checked against the capability's declared schema before any
handler runs. Values are never coerced: a wrong type or an enum value with
the wrong case is an error, not a fix-up.
"""

from typing import Any, Dict, Optional, Tuple

from ..logging_utils import get_logger
from ..tool_schemas import Capability
from .error_helpers import invalid_argument_value_error, missing_argument_error
from .types import ToolArgumentsDict, ToolResult

logger = get_logger(__name__)


def validate_arguments(
    capability: Capability,
    arguments: Optional[Dict[str, Any]],
) -> Tuple[ToolArgumentsDict, Optional[ToolResult]]:
    """
    Validate tool arguments against a capability schema.

    Checks run in declaration order: first every required parameter must be
    present (a null value counts as absent), then every supplied value must
    be a string and, for enumerated parameters, a member of the declared set.
    Parameters not in the schema are dropped.

    Returns:
        (validated_arguments, None) on success, ({}, error_result) on failure.
    """
    if arguments is None:
        arguments = {}

    tool_name = capability.name.value

    for param_name in capability.required_params:
        if arguments.get(param_name) is None:
            return {}, missing_argument_error(tool_name, param_name)

    validated: ToolArgumentsDict = {}
    for param in capability.params:
        value = arguments.get(param.name)
        if value is None:
            continue

        if not isinstance(value, str):
            return {}, invalid_argument_value_error(
                tool_name,
                param.name,
                value,
                valid_values=param.enum,
                reason=f"expected a string, got {type(value).__name__}",
            )

        if param.enum is not None and value not in param.enum:
            return {}, invalid_argument_value_error(tool_name, param.name, value, valid_values=param.enum)

        validated[param.name] = value

    extra = sorted(set(arguments) - {p.name for p in capability.params})
    if extra:
        logger.debug(f"Ignoring undeclared parameters for '{tool_name}': {extra}")

    return validated, None
