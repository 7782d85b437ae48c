"""
Common utilities for MCP tool handlers.

Every tool returns a CallToolResult: a human-readable text block plus, on
success, the structured payload matching the tool's output schema.
"""

from typing import Any, Dict, Optional

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel

FAILURE_MARKER = "✗"
SUCCESS_MARKER = "✓"


def success_response(text: str, structured: Optional[Dict[str, Any]] = None) -> CallToolResult:
    """
    Create a success response.

    Args:
        text: Multi-line summary for the agent/user
        structured: Payload matching the tool's declared output schema
    """
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        structuredContent=structured,
        isError=False,
    )


def error_response(message: str) -> CallToolResult:
    """Create an error response. ``message`` is shown verbatim."""
    return CallToolResult(
        content=[TextContent(type="text", text=message)],
        isError=True,
    )


def failure_text(failure_message: str, error: Optional[BaseException]) -> str:
    """'✗ <what failed>: <why>' with 'Unknown error' when there is no why."""
    reason = str(error) if error is not None else ""
    return f"{FAILURE_MARKER} {failure_message}: {reason or 'Unknown error'}"


def dump_output(model: BaseModel) -> Dict[str, Any]:
    """Serialize an output model, dropping absent optional fields."""
    return model.model_dump(mode="json", exclude_none=True)
