"""
Per-process request context handed to every tool handler.
"""

from dataclasses import dataclass

from coderswap_mcp.config import GatewayConfig
from coderswap_mcp.coderswap_client import CoderSwapClient
from coderswap_mcp.guardrail_policy import GuardrailPolicy


@dataclass(frozen=True)
class GatewayContext:
    """
    Built once in main() after the policy has loaded, then passed by
    reference into each call. Holds no mutable state.
    """
    config: GatewayConfig
    policy: GuardrailPolicy
    client: CoderSwapClient

    @classmethod
    def create(cls, config: GatewayConfig, policy: GuardrailPolicy) -> "GatewayContext":
        client = CoderSwapClient(config.base_url, config.api_key, timeout=config.http_timeout)
        return cls(config=config, policy=policy, client=client)
