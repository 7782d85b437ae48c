"""
MCP Tool Handlers

Handler registry pattern for tool dispatch. Importing this package
registers every tool through the @mcp_tool decorator.
"""

from typing import Any, Dict, Optional

from mcp.types import CallToolResult

# Import all handlers (registration happens at import time)
from .projects import (
    handle_create_project,
    handle_list_projects,
    handle_get_project_stats,
)
from .research import (
    handle_research_ingest,
    handle_get_job_status,
)
from .search import (
    handle_search,
    handle_validate_search,
)
from .session import (
    handle_log_session_note,
)

from .context import GatewayContext
from .decorators import get_tool_definition, get_tool_registry, list_registered_tools
from .error_helpers import tool_not_found_error
from .utils import error_response, success_response


async def dispatch_tool(
    name: str,
    arguments: Optional[Dict[str, Any]],
    context: GatewayContext,
) -> CallToolResult:
    """
    Route a tool call to its registered handler.

    Always returns a CallToolResult; unknown tools get an error envelope.
    """
    handler = get_tool_registry().get(name)
    if handler is None:
        return tool_not_found_error(name, list_registered_tools())
    return await handler(arguments, context)
