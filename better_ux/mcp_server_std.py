#!/usr/bin/env python3
"""
Better UX MCP Server - Standard MCP Protocol Implementation

Serves UX/UI guidance tools (responsiveness, Material-UI, Apple design,
Nielsen heuristics, cognitive biases) for React/MUI components over stdio.
Works with any MCP client (Claude Desktop, Cursor, ...).

Usage:
    better-ux-mcp                  # run the stdio server
    better-ux-mcp --list-tools     # print the tool catalog as JSON
    python -m better_ux
"""

import argparse
import asyncio
import json
import os
import sys
from typing import Any, Optional, Sequence

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from .logging_utils import configure_logging, get_logger
from .mcp_handlers import dispatch_tool
from .mcp_handlers.error_helpers import system_error
from .server_config import VALID_LOG_LEVELS, get_config
from .tool_schemas import get_tool_definitions

logger = get_logger(__name__)

config = get_config()

# Create MCP server instance
server = Server(config.server_name, version=config.server_version)


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available MCP tools"""
    return get_tool_definitions()


# Input validation happens in dispatch_tool so clients get typed error codes
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    """Handle tool calls from MCP client"""
    if arguments is None:
        arguments = {}

    try:
        result = await dispatch_tool(name, arguments)
    except Exception as e:
        logger.error(f"Unhandled error in {name}: {e}", exc_info=True)
        result = system_error(str(name), e)

    return result.to_call_tool_result()


def catalog_as_json() -> list[dict]:
    """Tool catalog in the same shape clients see from tools/list."""
    return [
        tool.model_dump(mode="json", by_alias=True, exclude_none=True)
        for tool in get_tool_definitions()
    ]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Better UX MCP Server (stdio transport)"
    )
    parser.add_argument(
        "--list-tools",
        action="store_true",
        help="Print the tool catalog as JSON and exit"
    )
    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        type=str.upper,
        default=None,
        help=f"Log level (default: {config.log_level}, or BETTER_UX_LOG_LEVEL)"
    )
    return parser.parse_args(argv)


async def serve() -> None:
    """Run the MCP server on stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    if args.list_tools:
        print(json.dumps(catalog_as_json(), indent=2, ensure_ascii=False))
        return 0

    logger.info(
        f"{config.server_name} v{config.server_version} running on stdio (PID: {os.getpid()})"
    )
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
