"""
Pytest configuration and fixtures for coderswap-mcp tests.

The backend is faked with httpx.MockTransport: no test touches the network.
"""

import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
from mcp.types import CallToolResult, TextContent

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from coderswap_mcp.config import GatewayConfig
from coderswap_mcp.coderswap_client import CoderSwapClient
from coderswap_mcp.guardrail_policy import load_guardrail_policy
from coderswap_mcp.mcp_handlers import GatewayContext

BASE_URL = "http://coderswap.test"
API_KEY = "test-api-key"

RouteHandler = Callable[[httpx.Request], httpx.Response]


class FakeBackend:
    """Route table keyed by (method, path) that records every request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], RouteHandler] = {}

    def route(
        self,
        method: str,
        path: str,
        handler: Optional[RouteHandler] = None,
        *,
        json_body: Any = None,
        status_code: int = 200,
        text: Optional[str] = None,
    ) -> None:
        if handler is None:
            def handler(request: httpx.Request) -> httpx.Response:
                if text is not None:
                    return httpx.Response(status_code, text=text)
                return httpx.Response(status_code, json=json_body)
        self.routes[(method, path)] = handler

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"detail": f"No route for {request.method} {request.url.path}"})
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]


def result_text(result: CallToolResult) -> str:
    """Concatenate the text blocks of a tool result."""
    return "\n".join(
        block.text for block in result.content if isinstance(block, TextContent)
    )


def request_json(request: httpx.Request) -> Dict[str, Any]:
    return json.loads(request.content)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def client(backend):
    return CoderSwapClient(BASE_URL, API_KEY, transport=backend.transport)


@pytest.fixture(scope="session")
def policy():
    """The packaged guardrail policy (verified against the pinned hash)."""
    return load_guardrail_policy()


@pytest.fixture
def gateway_context(client, policy):
    config = GatewayConfig(base_url=BASE_URL, api_key=API_KEY)
    return GatewayContext(config=config, policy=policy, client=client)
