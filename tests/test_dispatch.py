"""
Tests for the dispatch pipeline (better_ux/mcp_handlers/__init__.py).

End-to-end behaviour of list_capabilities / dispatch_tool / get_checklist:
name resolution, argument validation, alias resolution, envelope assembly
and determinism.
"""

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from better_ux.guidelines import UX_CHECKLIST, get_guidance
from better_ux.mcp_handlers import TOOL_HANDLERS, dispatch_tool, get_checklist, list_capabilities
from better_ux.mcp_handlers.guidance import format_guidance
from better_ux.mcp_handlers.types import ErrorKind
from better_ux.tool_schemas import CAPABILITIES, CapabilityName


def _parse_error(result):
    """Parse the single JSON error block of an error envelope."""
    assert result.is_error
    assert len(result.content) == 1
    return json.loads(result.content[0].text)


COMPONENT_TOOLS = [c.name.value for c in CAPABILITIES if "component" in c.required_params]


# ============================================================================
# list_capabilities
# ============================================================================

class TestListCapabilities:

    def test_seven_entries(self):
        assert len(list_capabilities()) == 7

    def test_unique_names(self):
        names = [c.name for c in list_capabilities()]
        assert len(names) == len(set(names))

    def test_required_args_have_schema(self):
        for capability in list_capabilities():
            if capability.required_params:
                assert capability.input_schema()["properties"]

    def test_same_catalog_every_call(self):
        assert list_capabilities() is list_capabilities()

    def test_handlers_cover_catalog(self):
        assert set(TOOL_HANDLERS) == {c.name for c in list_capabilities()}


# ============================================================================
# Unknown capability
# ============================================================================

class TestUnknownCapability:

    @pytest.mark.asyncio
    async def test_delete_everything(self):
        result = await dispatch_tool("delete_everything", {"component": "x"})
        assert result.error_kind is ErrorKind.UNKNOWN_CAPABILITY
        assert "delete_everything" in _parse_error(result)["error"]

    @pytest.mark.asyncio
    async def test_no_lookup_for_unknown_tool(self):
        with patch("better_ux.mcp_handlers.guidance.get_guidance") as lookup:
            await dispatch_tool("delete_everything", {"component": "x"})
        lookup.assert_not_called()

    @pytest.mark.asyncio
    async def test_case_sensitive_names(self):
        result = await dispatch_tool("Apply_Responsiveness", {"component": "x"})
        assert result.error_kind is ErrorKind.UNKNOWN_CAPABILITY

    @pytest.mark.asyncio
    async def test_none_name(self):
        result = await dispatch_tool(None, None)
        assert result.error_kind is ErrorKind.UNKNOWN_CAPABILITY


# ============================================================================
# Validation is total
# ============================================================================

class TestMissingArguments:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool", COMPONENT_TOOLS)
    async def test_missing_component(self, tool):
        result = await dispatch_tool(tool, {})
        data = _parse_error(result)
        assert result.error_kind is ErrorKind.MISSING_ARGUMENT
        assert data["param_name"] == "component"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool", COMPONENT_TOOLS)
    async def test_null_arguments(self, tool):
        result = await dispatch_tool(tool, None)
        assert result.error_kind is ErrorKind.MISSING_ARGUMENT

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool,param", [
        ("apply_nielsen_heuristic", "heuristic"),
        ("apply_cognitive_bias", "bias"),
    ])
    async def test_missing_enum_param(self, tool, param):
        result = await dispatch_tool(tool, {"component": "x"})
        assert result.error_kind is ErrorKind.MISSING_ARGUMENT
        assert _parse_error(result)["param_name"] == param

    @pytest.mark.asyncio
    async def test_missing_argument_never_reaches_registry(self):
        with patch("better_ux.mcp_handlers.guidance.get_guidance") as lookup:
            await dispatch_tool("apply_nielsen_heuristic", {"heuristic": "1"})
        lookup.assert_not_called()


# ============================================================================
# Nielsen heuristics
# ============================================================================

class TestNielsenHeuristic:

    @pytest.mark.asyncio
    async def test_heuristic_one(self, sample_component):
        result = await dispatch_tool("apply_nielsen_heuristic", {"component": sample_component, "heuristic": "1"})
        assert not result.is_error
        entry = get_guidance("nielsen_1")
        assert entry.instructions in result.text
        assert entry.description in result.text
        assert sample_component in result.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["11", "0", "-1"])
    async def test_outside_enum(self, value):
        result = await dispatch_tool("apply_nielsen_heuristic", {"component": "x", "heuristic": value})
        data = _parse_error(result)
        assert result.error_kind is ErrorKind.INVALID_ARGUMENT_VALUE
        assert data["param_name"] == "heuristic"
        assert data["provided_value"] == value

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["4", "6", "7", "8", "9", "10"])
    async def test_gaps_are_unknown_topics(self, value):
        result = await dispatch_tool("apply_nielsen_heuristic", {"component": "x", "heuristic": value})
        data = _parse_error(result)
        assert result.error_kind is ErrorKind.UNKNOWN_TOPIC
        assert data["topic"] == value

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["1", "2", "3", "5"])
    async def test_authored_heuristics(self, value):
        result = await dispatch_tool("apply_nielsen_heuristic", {"component": "x", "heuristic": value})
        assert not result.is_error
        assert f"Nielsen #{value}" in result.text


# ============================================================================
# Cognitive biases / alias resolution
# ============================================================================

class TestCognitiveBias:

    @pytest.mark.asyncio
    async def test_fitts(self):
        result = await dispatch_tool("apply_cognitive_bias", {"component": "x", "bias": "fitts"})
        assert not result.is_error
        assert "Fitts's Law" in result.text
        assert get_guidance("fitts_law").instructions in result.text

    @pytest.mark.asyncio
    async def test_grouping(self):
        result = await dispatch_tool("apply_cognitive_bias", {"component": "x", "bias": "grouping"})
        assert not result.is_error
        assert "Grouping" in result.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["proximity", "zeigarnik", "serial-position", "hicks"])
    async def test_unmapped_codes_are_unknown_topics(self, code):
        first = await dispatch_tool("apply_cognitive_bias", {"component": "x", "bias": code})
        second = await dispatch_tool("apply_cognitive_bias", {"component": "x", "bias": code})
        assert first.error_kind is ErrorKind.UNKNOWN_TOPIC
        assert first == second
        assert code in _parse_error(first)["error"]

    @pytest.mark.asyncio
    async def test_alias_to_missing_entry_is_unknown_topic(self):
        with patch("better_ux.mcp_handlers.guidance.get_guidance", return_value=None):
            result = await dispatch_tool("apply_cognitive_bias", {"component": "x", "bias": "fitts"})
        assert result.error_kind is ErrorKind.UNKNOWN_TOPIC

    @pytest.mark.asyncio
    async def test_undeclared_code_is_invalid(self):
        result = await dispatch_tool("apply_cognitive_bias", {"component": "x", "bias": "anchoring"})
        assert result.error_kind is ErrorKind.INVALID_ARGUMENT_VALUE


# ============================================================================
# Topic tools and envelope layout
# ============================================================================

class TestEnvelopeAssembly:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool,key", [
        ("apply_responsiveness", "responsiveness"),
        ("apply_material_ui_best_practices", "material_ui"),
        ("apply_apple_design", "apple_design"),
    ])
    async def test_topic_tools(self, tool, key, sample_component):
        result = await dispatch_tool(tool, {"component": sample_component})
        assert not result.is_error
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.text == format_guidance(get_guidance(key), sample_component)

    @pytest.mark.asyncio
    async def test_section_order(self):
        result = await dispatch_tool("apply_responsiveness", {"component": "MyComp"})
        entry = get_guidance("responsiveness")
        text = result.text
        positions = [
            text.index(entry.description),
            text.index(entry.instructions),
            text.index("**Example:**"),
            text.index(entry.example),
            text.index("**Component:** MyComp"),
        ]
        assert positions == sorted(positions)

    @pytest.mark.asyncio
    async def test_no_example_section_without_example(self):
        result = await dispatch_tool("apply_nielsen_heuristic", {"component": "x", "heuristic": "2"})
        assert "**Example:**" not in result.text

    @pytest.mark.asyncio
    async def test_complete_ux(self, sample_component):
        result = await dispatch_tool("apply_complete_ux", {"component": sample_component})
        assert not result.is_error
        assert "Complete Checklist" in result.text
        assert f"**Component:** {sample_component}" in result.text
        assert result.text.endswith("Apply ALL of the guidelines above to the specified component.")

    @pytest.mark.asyncio
    async def test_complete_ux_does_no_lookup(self):
        with patch("better_ux.mcp_handlers.guidance.get_guidance") as lookup:
            result = await dispatch_tool("apply_complete_ux", {"component": "x"})
        assert not result.is_error
        lookup.assert_not_called()

    @pytest.mark.asyncio
    async def test_extra_arguments_ignored(self):
        result = await dispatch_tool("apply_apple_design", {"component": "x", "theme": "dark"})
        assert not result.is_error
        assert "dark" not in result.text


# ============================================================================
# Pass-through integrity
# ============================================================================

class TestPassThrough:

    COMPONENTS = [
        "",
        "   ",
        "line one\nline two\n\n\tindented",
        "<Button sx={{ '&:hover': { opacity: 0.5 } }}>{\"quoted\"} & 'single'</Button>",
        "Ação → ✅ 🚀 \\n literal backslash",
        "**Component:** nested marker",
        "{\"json\": [1, 2, 3]}",
    ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("component", COMPONENTS)
    @pytest.mark.parametrize("tool", ["apply_responsiveness", "apply_material_ui_best_practices", "apply_apple_design"])
    async def test_topic_tools_echo_verbatim(self, tool, component):
        result = await dispatch_tool(tool, {"component": component})
        assert not result.is_error
        assert result.text.endswith(f"**Component:** {component}")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("component", COMPONENTS)
    async def test_heuristic_and_bias_echo_verbatim(self, component):
        heuristic = await dispatch_tool("apply_nielsen_heuristic", {"component": component, "heuristic": "3"})
        bias = await dispatch_tool("apply_cognitive_bias", {"component": component, "bias": "grouping"})
        assert heuristic.text.endswith(f"**Component:** {component}")
        assert bias.text.endswith(f"**Component:** {component}")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("component", COMPONENTS)
    async def test_complete_ux_echo_verbatim(self, component):
        result = await dispatch_tool("apply_complete_ux", {"component": component})
        assert f"**Component:** {component}\n\n" in result.text


# ============================================================================
# Checklist and determinism
# ============================================================================

class TestChecklist:

    @pytest.mark.asyncio
    async def test_checklist_tool(self):
        result = await dispatch_tool("get_ux_checklist", {})
        assert not result.is_error
        assert len(result.content) == 1
        assert result.text == UX_CHECKLIST

    @pytest.mark.asyncio
    async def test_checklist_with_null_arguments(self):
        result = await dispatch_tool("get_ux_checklist", None)
        assert result.text == UX_CHECKLIST

    @pytest.mark.asyncio
    async def test_checklist_stable(self):
        first = await dispatch_tool("get_ux_checklist", {})
        second = await dispatch_tool("get_ux_checklist", {})
        assert first == second

    def test_get_checklist_direct(self):
        assert get_checklist() == get_checklist()
        assert get_checklist().text == UX_CHECKLIST


class TestDeterminism:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,arguments", [
        ("apply_responsiveness", {"component": "x"}),
        ("apply_nielsen_heuristic", {"component": "x", "heuristic": "1"}),
        ("apply_nielsen_heuristic", {"component": "x", "heuristic": "11"}),
        ("apply_cognitive_bias", {"component": "x", "bias": "proximity"}),
        ("apply_complete_ux", {}),
        ("delete_everything", {}),
    ])
    async def test_identical_output(self, name, arguments):
        first = (await dispatch_tool(name, dict(arguments))).to_call_tool_result()
        second = (await dispatch_tool(name, dict(arguments))).to_call_tool_result()
        assert first.model_dump_json() == second.model_dump_json()


# ============================================================================
# Fault boundary
# ============================================================================

class TestFaultBoundary:

    @pytest.mark.asyncio
    async def test_handler_exception_becomes_error_envelope(self):
        with patch("better_ux.mcp_handlers.guidance.get_guidance", side_effect=RuntimeError("registry exploded")):
            result = await dispatch_tool("apply_responsiveness", {"component": "x"})
        data = _parse_error(result)
        assert result.error_kind is ErrorKind.INTERNAL_ERROR
        assert "registry exploded" in data["error"]

    @pytest.mark.asyncio
    async def test_server_keeps_working_after_fault(self):
        with patch("better_ux.mcp_handlers.guidance.get_guidance", side_effect=RuntimeError("boom")):
            await dispatch_tool("apply_apple_design", {"component": "x"})
        result = await dispatch_tool("apply_apple_design", {"component": "x"})
        assert not result.is_error
