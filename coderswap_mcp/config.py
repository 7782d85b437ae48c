"""
Process configuration for the CoderSwap MCP server.

Read once from the environment at startup. A missing API key is fatal.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_BASE_URL = "http://localhost:8000"


class ConfigError(Exception):
    """Raised when required process configuration is missing or malformed."""


@dataclass(frozen=True)
class GatewayConfig:
    """Immutable settings for the backend connection."""

    base_url: str
    api_key: str
    debug: bool = False
    # None = no timeout at this layer; a hung backend call hangs the tool call
    http_timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GatewayConfig":
        """
        Build config from environment variables.

        CODERSWAP_BASE_URL      backend root (default http://localhost:8000)
        CODERSWAP_API_KEY       shared-secret credential (required)
        DEBUG                   "true" enables verbose logging
        CODERSWAP_HTTP_TIMEOUT  optional per-request timeout in seconds
        """
        env = os.environ if environ is None else environ

        api_key = env.get("CODERSWAP_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("CODERSWAP_API_KEY environment variable is required")

        base_url = (env.get("CODERSWAP_BASE_URL") or DEFAULT_BASE_URL).strip().rstrip("/")

        raw_timeout = env.get("CODERSWAP_HTTP_TIMEOUT", "").strip()
        http_timeout = None
        if raw_timeout:
            try:
                http_timeout = float(raw_timeout)
            except ValueError:
                raise ConfigError(
                    f"CODERSWAP_HTTP_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                ) from None
            if http_timeout <= 0:
                raise ConfigError("CODERSWAP_HTTP_TIMEOUT must be positive")

        return cls(
            base_url=base_url,
            api_key=api_key,
            debug=env.get("DEBUG", "").strip().lower() == "true",
            http_timeout=http_timeout,
        )
