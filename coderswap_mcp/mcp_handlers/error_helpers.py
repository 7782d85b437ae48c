"""
Standardized error responses for the dispatch layer.
"""

import difflib
from typing import Iterable

from mcp.types import CallToolResult
from pydantic import ValidationError

from coderswap_mcp.guardrails import GUARDRAIL_VIOLATION_MESSAGE
from .utils import FAILURE_MARKER, error_response, failure_text


def guardrail_violation_error() -> CallToolResult:
    """Fixed rejection for content that tries to switch off the guardrails."""
    return error_response(GUARDRAIL_VIOLATION_MESSAGE)


def format_validation_errors(exc: ValidationError) -> str:
    """One 'field: message' fragment per failed constraint."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def invalid_arguments_error(tool_name: str, exc: ValidationError) -> CallToolResult:
    """Input failed the tool's declared shape; nothing was invoked."""
    return error_response(
        f"{FAILURE_MARKER} Invalid arguments for {tool_name}: {format_validation_errors(exc)}"
    )


def tool_failure_error(failure_message: str, error: BaseException) -> CallToolResult:
    """Backend or transport failure surfaced as an error envelope."""
    return error_response(failure_text(failure_message, error))


def tool_not_found_error(tool_name: str, available_tools: Iterable[str]) -> CallToolResult:
    """Unknown tool, with close-match suggestions."""
    similar = difflib.get_close_matches(tool_name, list(available_tools), n=3, cutoff=0.4)
    message = f"{FAILURE_MARKER} Unknown tool: {tool_name}"
    if similar:
        message += ". Did you mean: " + ", ".join(f"'{s}'" for s in similar) + "?"
    return error_response(message)
