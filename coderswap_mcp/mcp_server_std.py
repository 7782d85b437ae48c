#!/usr/bin/env python3
"""
CoderSwap MCP Server - Standard MCP Protocol (stdio)

Exposes the CoderSwap tools to an MCP client and forwards them to the
CoderSwap backend. The guardrail policy is verified and rendered before
anything else; the rendered text becomes the session instructions.

Usage:
    CODERSWAP_API_KEY=... coderswap-mcp
    CODERSWAP_API_KEY=... python -m coderswap_mcp

Configuration:
    CODERSWAP_BASE_URL   backend root (default http://localhost:8000)
    CODERSWAP_API_KEY    required
    DEBUG=true           verbose logging to stderr
"""

import asyncio
import sys
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from coderswap_mcp import __version__
from coderswap_mcp.config import ConfigError, GatewayConfig
from coderswap_mcp.guardrail_policy import GuardrailPolicyError, load_guardrail_policy
from coderswap_mcp.logging_utils import configure_logging, get_logger
from coderswap_mcp.mcp_handlers import GatewayContext, dispatch_tool
from coderswap_mcp.tool_schemas import get_tool_definitions

logger = get_logger(__name__)

SERVER_NAME = "coderswap-mcp"


class StartupError(Exception):
    """Fatal startup failure; the server must not accept connections."""


def startup(
    environ: Optional[Mapping[str, str]] = None,
    prompt_path: Union[str, Path, None] = None,
    expected_hash: Optional[str] = None,
) -> GatewayContext:
    """
    Load the guardrail policy, then the configuration, and build the
    request context. Policy first: nothing else matters if it is invalid.

    Raises:
        StartupError: with the diagnostic to print before exiting
    """
    try:
        policy = load_guardrail_policy(prompt_path, expected_hash)
    except GuardrailPolicyError as e:
        raise StartupError(f"Failed to load guardrail prompt. {e}") from e

    try:
        config = GatewayConfig.from_env(environ)
    except ConfigError as e:
        raise StartupError(str(e)) from e

    return GatewayContext.create(config, policy)


def build_server(context: GatewayContext) -> Server:
    """Create the MCP server with the policy bound as session instructions."""
    server = Server(SERVER_NAME, version=__version__, instructions=context.policy.text)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        """List all available MCP tools"""
        return get_tool_definitions()

    # Arguments are validated by each tool's pydantic model in dispatch
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[dict[str, Any]]) -> CallToolResult:
        """Handle tool calls from MCP client"""
        return await dispatch_tool(name, arguments, context)

    return server


async def serve(context: GatewayContext) -> None:
    server = build_server(context)
    logger.info(f"CoderSwap MCP Server starting with backend: {context.config.base_url}")
    logger.info(
        f"Guardrail policy v{context.policy.version} "
        f"(last updated {context.policy.last_updated}) bound as session instructions"
    )
    async with stdio_server() as (read_stream, write_stream):
        logger.info("CoderSwap MCP Server ready and listening on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main() -> None:
    """Main entry point for MCP server"""
    configure_logging()
    try:
        context = startup()
    except StartupError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    # DEBUG=true is known only once the config has loaded
    configure_logging(verbose=context.config.debug)

    asyncio.run(serve(context))


if __name__ == "__main__":
    main()
