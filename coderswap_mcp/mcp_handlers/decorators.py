"""
MCP Tool Decorators - registration and the dispatch choke point

Every handler is wrapped the same way:
1. validate raw arguments against the tool's input model
2. scan guardrail-sensitive fields for bypass attempts
3. invoke the handler
4. turn any raised failure into the standard error envelope

The wrapper never raises.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Type
from functools import wraps
import time

from mcp.types import CallToolResult
from pydantic import BaseModel, ValidationError

from coderswap_mcp.coderswap_client import CoderSwapError
from coderswap_mcp.guardrails import contains_guardrail_bypass
from coderswap_mcp.logging_utils import get_logger
from .context import GatewayContext
from .error_helpers import guardrail_violation_error, invalid_arguments_error, tool_failure_error

logger = get_logger(__name__)

Handler = Callable[[Any, GatewayContext], Awaitable[CallToolResult]]
WrappedHandler = Callable[[Optional[Dict[str, Any]], GatewayContext], Awaitable[CallToolResult]]


# --- Tool Registry ---

@dataclass
class ToolDefinition:
    """Single source of truth for a registered MCP tool."""
    name: str
    handler: WrappedHandler
    input_model: Type[BaseModel]
    output_model: Type[BaseModel]
    title: str = ""
    description: str = ""
    failure_message: str = ""
    guardrail_fields: Tuple[str, ...] = field(default_factory=tuple)

    def input_schema(self) -> Dict[str, Any]:
        return self.input_model.model_json_schema()

    def output_schema(self) -> Dict[str, Any]:
        return self.output_model.model_json_schema()


_TOOL_DEFINITIONS: Dict[str, ToolDefinition] = {}


def mcp_tool(
    name: str,
    *,
    input_model: Type[BaseModel],
    output_model: Type[BaseModel],
    title: str = "",
    description: Optional[str] = None,
    failure_message: Optional[str] = None,
    guardrail_fields: Tuple[str, ...] = (),
    register: bool = True,
):
    """
    Decorator for MCP tool handlers.

    Usage:
        @mcp_tool(
            "coderswap_search",
            title="CoderSwap Hybrid Search",
            input_model=SearchParams,
            output_model=SearchOutput,
            failure_message="Search failed",
        )
        async def handle_search(params: SearchParams, ctx: GatewayContext) -> CallToolResult:
            ...

    Args:
        name: Tool name exposed over MCP
        input_model: Pydantic model the raw arguments must satisfy
        output_model: Pydantic model the structured result satisfies
        title: Human title
        description: Tool description (defaults to first docstring line)
        failure_message: Prefix for backend failures ("Search failed")
        guardrail_fields: Input fields scanned for guardrail bypass phrases
        register: If False, the wrapper is built but not exposed
    """
    def decorator(func: Handler) -> WrappedHandler:
        tool_description = description or (func.__doc__ and func.__doc__.strip().split('\n')[0].strip()) or ""
        tool_failure = failure_message or f"Tool '{name}' failed"
        scanned = set(guardrail_fields)

        @wraps(func)
        async def wrapper(arguments: Optional[Dict[str, Any]], context: GatewayContext) -> CallToolResult:
            try:
                params = input_model.model_validate(arguments or {})
            except ValidationError as e:
                logger.info(f"Tool '{name}' rejected: invalid arguments ({e.error_count()} error(s))")
                return invalid_arguments_error(name, e)

            if scanned and contains_guardrail_bypass(params.model_dump(include=scanned)):
                logger.warning(f"Tool '{name}' rejected: guardrail bypass attempt")
                return guardrail_violation_error()

            start_time = time.time()
            try:
                result = await func(params, context)
            except Exception as e:
                # Backend failures are expected; anything else gets a traceback
                logger.error(
                    f"{tool_failure}: {e}",
                    exc_info=not isinstance(e, CoderSwapError),
                )
                return tool_failure_error(tool_failure, e)

            logger.debug(f"Tool '{name}' completed in {time.time() - start_time:.3f}s")
            return result

        if register:
            _TOOL_DEFINITIONS[name] = ToolDefinition(
                name=name,
                handler=wrapper,
                input_model=input_model,
                output_model=output_model,
                title=title,
                description=tool_description,
                failure_message=tool_failure,
                guardrail_fields=tuple(guardrail_fields),
            )

        return wrapper
    return decorator


def get_tool_registry() -> Dict[str, WrappedHandler]:
    """Get the registered tool handlers."""
    return {name: td.handler for name, td in _TOOL_DEFINITIONS.items()}


def get_tool_definition(tool_name: str) -> Optional[ToolDefinition]:
    """Get the full ToolDefinition for a registered tool."""
    return _TOOL_DEFINITIONS.get(tool_name)


def list_registered_tools() -> List[str]:
    """Registered tool names in registration order."""
    return list(_TOOL_DEFINITIONS.keys())
