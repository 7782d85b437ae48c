"""
Tool Schema Definitions

MCP Tool listings derived from the handler registry, so names, titles and
JSON schemas have a single source of truth.
"""

from typing import List

from mcp.types import Tool

from coderswap_mcp.mcp_handlers import get_tool_definition, list_registered_tools


def get_tool_definitions() -> List[Tool]:
    """Get MCP tool definitions for list_tools, in registration order."""
    tools = []
    for name in list_registered_tools():
        td = get_tool_definition(name)
        tools.append(Tool(
            name=td.name,
            title=td.title or None,
            description=td.description,
            inputSchema=td.input_schema(),
            outputSchema=td.output_schema(),
        ))
    return tools
