"""
Tool Schema Definitions

Single source of truth for the capability catalog: names, descriptions,
argument schemas and the bias alias map. The stdio server and the
dispatcher both read from here.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from mcp.types import Tool
from pydantic import BaseModel, ConfigDict, Field

from . import guidelines


class CapabilityName(str, Enum):
    """Closed set of tool names, in catalog order."""

    APPLY_RESPONSIVENESS = "apply_responsiveness"
    APPLY_MATERIAL_UI_BEST_PRACTICES = "apply_material_ui_best_practices"
    APPLY_APPLE_DESIGN = "apply_apple_design"
    APPLY_NIELSEN_HEURISTIC = "apply_nielsen_heuristic"
    APPLY_COGNITIVE_BIAS = "apply_cognitive_bias"
    APPLY_COMPLETE_UX = "apply_complete_ux"
    GET_UX_CHECKLIST = "get_ux_checklist"

    @classmethod
    def parse(cls, name: Any) -> Optional["CapabilityName"]:
        """Exact-match lookup; None for anything not in the catalog."""
        try:
            return cls(name)
        except (ValueError, TypeError):
            return None


class ParamSpec(BaseModel):
    """One argument of a capability."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    type: str = "string"
    required: bool = True
    enum: Optional[tuple[str, ...]] = None

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        return schema


class Capability(BaseModel):
    """Immutable descriptor for a single tool."""

    model_config = ConfigDict(frozen=True)

    name: CapabilityName
    description: str
    params: tuple[ParamSpec, ...] = Field(default_factory=tuple)

    @property
    def required_params(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.params if p.required)

    def get_param(self, name: str) -> Optional[ParamSpec]:
        for param in self.params:
            if param.name == name:
                return param
        return None

    def input_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.to_json_schema() for p in self.params},
        }
        if self.required_params:
            schema["required"] = list(self.required_params)
        return schema

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name.value,
            description=self.description,
            inputSchema=self.input_schema(),
        )


HEURISTIC_NUMBERS: tuple[str, ...] = tuple(str(n) for n in range(1, 11))

BIAS_CODES: tuple[str, ...] = (
    "fitts",
    "grouping",
    "proximity",
    "zeigarnik",
    "serial-position",
    "hicks",
)

# Short bias codes -> registry keys. Codes without an entry here have no
# authored content and resolve to an unknown topic.
BIAS_ALIASES: Mapping[str, str] = MappingProxyType({
    "fitts": guidelines.FITTS_LAW,
    "grouping": guidelines.GROUPING_EFFECT,
})


_COMPONENT = ParamSpec(
    name="component",
    description="Component source code or file name",
)

CAPABILITIES: tuple[Capability, ...] = (
    Capability(
        name=CapabilityName.APPLY_RESPONSIVENESS,
        description="Apply mobile-first responsiveness to a React/MUI component",
        params=(_COMPONENT,),
    ),
    Capability(
        name=CapabilityName.APPLY_MATERIAL_UI_BEST_PRACTICES,
        description="Apply Material-UI best practices (theme.spacing, alpha, sx prop)",
        params=(_COMPONENT,),
    ),
    Capability(
        name=CapabilityName.APPLY_APPLE_DESIGN,
        description="Apply Apple design patterns (scrollbar, animations, minimalism)",
        params=(_COMPONENT,),
    ),
    Capability(
        name=CapabilityName.APPLY_NIELSEN_HEURISTIC,
        description="Apply a specific Nielsen usability heuristic",
        params=(
            _COMPONENT,
            ParamSpec(
                name="heuristic",
                description="Heuristic number (1-10)",
                enum=HEURISTIC_NUMBERS,
            ),
        ),
    ),
    Capability(
        name=CapabilityName.APPLY_COGNITIVE_BIAS,
        description="Apply a specific cognitive bias for better UX",
        params=(
            _COMPONENT,
            ParamSpec(
                name="bias",
                description="Cognitive bias to apply",
                enum=BIAS_CODES,
            ),
        ),
    ),
    Capability(
        name=CapabilityName.APPLY_COMPLETE_UX,
        description="Apply ALL UX/UI guidelines (responsiveness, MUI, Apple, Nielsen, biases)",
        params=(_COMPONENT,),
    ),
    Capability(
        name=CapabilityName.GET_UX_CHECKLIST,
        description="Return the UX/UI checklist for validation",
    ),
)

_BY_NAME: Mapping[CapabilityName, Capability] = MappingProxyType({c.name: c for c in CAPABILITIES})


def get_capability(name: Any) -> Optional[Capability]:
    """Look up a capability by tool name. None if the name is not in the catalog."""
    parsed = CapabilityName.parse(name)
    if parsed is None:
        return None
    return _BY_NAME[parsed]


def resolve_bias_alias(code: str) -> Optional[str]:
    """Registry key for a bias short code, or None if the code is unmapped."""
    return BIAS_ALIASES.get(code)


def get_tool_definitions() -> list[Tool]:
    """Get MCP tool definitions in catalog order."""
    return [capability.to_tool() for capability in CAPABILITIES]
