"""
Guardrail Policy Loader

Loads the CoderSwap system guardrail document, verifies it against a pinned
SHA-256 digest and renders it into the flat text block that is bound to
every agent session as the server instructions.

Any failure here is fatal: the server must not start without the policy.
"""

import hashlib
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

import yaml

from .logging_utils import get_logger

logger = get_logger(__name__)

PROMPT_PATH = Path(__file__).parent / "mcp_starter_prompt.yaml"
PROMPT_HASH = "7f576d594f264b01359bfa7071f5871058184513e5340deff912306413e5c698"

PROMPT_TITLE = "CoderSwap MCP System Guardrails"

# Only these top-level keys are rendered, in this order. Anything else in
# the document is dropped from the session instructions.
POLICY_SECTIONS: Tuple[Tuple[str, str], ...] = (
    ("product_overview", "Product Overview"),
    ("identity", "Identity"),
    ("privacy", "Privacy"),
    ("validation_and_security", "Validation and Security"),
    ("evaluation_standards", "Evaluation Standards"),
    ("promotion_policy", "Promotion Policy"),
    ("workflow", "Workflow"),
    ("communication_style", "Communication Style"),
    ("available_tools", "Available Tools"),
    ("human_in_loop", "Human in Loop"),
    ("error_handling", "Error Handling"),
    ("session_management", "Session Management"),
    ("workflow_templates", "Workflow Templates"),
)


class GuardrailPolicyError(Exception):
    """The guardrail document is missing, tampered with or unusable."""


@dataclass(frozen=True)
class GuardrailPolicy:
    """Loaded, verified guardrail document. Never mutated after load."""

    content_hash: str
    document: Mapping[str, Any] = field(repr=False)
    text: str = field(repr=False)

    @property
    def version(self) -> str:
        return str(self.document.get("version") or "unknown")

    @property
    def last_updated(self) -> str:
        return str(self.document.get("last_updated") or "unknown")


def compute_hash(raw: bytes) -> str:
    """SHA-256 hex digest of the raw document bytes."""
    return hashlib.sha256(raw).hexdigest()


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, (list, tuple, dict))


def format_value(value: Any, indent: str = "  ") -> str:
    """
    Pretty-print a policy value as nested bullet lines.

    Scalars become one bullet, sequences one bullet per element (nested
    containers are indented one level deeper), mappings render "key:"
    followed by the indented value. Empty containers and nulls render an
    explicit placeholder instead of disappearing.
    """
    if value is None:
        return f"{indent}- (none)"
    if isinstance(value, (list, tuple)):
        if not value:
            return f"{indent}- (none)"
        return "\n".join(
            f"{indent}- {_scalar(item)}" if _is_scalar(item) and item is not None
            else format_value(item, indent + "  ")
            for item in value
        )
    if isinstance(value, dict):
        if not value:
            return f"{indent}- (empty)"
        return "\n".join(
            f"{indent}- {key}:\n{format_value(val, indent + '  ')}"
            for key, val in value.items()
        )
    return f"{indent}- {_scalar(value)}"


def render_prompt(data: Mapping[str, Any]) -> str:
    """Render the parsed policy document into the session instruction text."""
    version = data.get("version") or "unknown"
    updated = data.get("last_updated") or "unknown"
    sections = [f"{PROMPT_TITLE}\nVersion: {version} (Last updated {updated})"]

    owners = data.get("owners")
    if isinstance(owners, list) and owners:
        lines = []
        for owner in owners:
            owner = owner if isinstance(owner, dict) else {}
            name = owner.get("name") or "Unknown"
            contact = f" ({owner['contact']})" if owner.get("contact") else ""
            lines.append(f"  - {name}{contact}")
        sections.append("Owners:\n" + "\n".join(lines))

    description = data.get("description")
    if description:
        sections.append(f"Description:\n  {str(description).strip()}")

    for key, title in POLICY_SECTIONS:
        value = data.get(key)
        if value is None:
            continue
        sections.append(f"== {title.upper()} ==\n{format_value(value)}")

    return "\n\n".join(sections)


def load_guardrail_policy(
    path: Union[str, Path, None] = None,
    expected_hash: Optional[str] = None,
) -> GuardrailPolicy:
    """
    Read, verify and render the guardrail document.

    Args:
        path: Document location (defaults to the packaged prompt)
        expected_hash: Pinned digest (defaults to PROMPT_HASH)

    Raises:
        GuardrailPolicyError: on read failure, hash mismatch, parse failure,
            a non-mapping or empty document, or an empty rendering
    """
    prompt_path = Path(path) if path is not None else PROMPT_PATH
    expected = expected_hash or PROMPT_HASH

    try:
        raw = prompt_path.read_bytes()
    except OSError as e:
        raise GuardrailPolicyError(f"Cannot read guardrail prompt {prompt_path}: {e}") from e

    digest = compute_hash(raw)
    if digest != expected:
        raise GuardrailPolicyError(
            f"Guardrail prompt hash mismatch. Expected {expected}, received {digest}. Refusing to start."
        )

    try:
        parsed = yaml.safe_load(raw.decode("utf-8"))
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        raise GuardrailPolicyError(f"Guardrail prompt is not valid YAML: {e}") from e

    if not isinstance(parsed, dict) or not parsed:
        raise GuardrailPolicyError("Parsed prompt is empty or invalid.")

    text = render_prompt(parsed)
    if not text.strip():
        raise GuardrailPolicyError("Rendered system prompt is empty.")

    logger.info(f"Guardrail prompt loaded successfully (prompt_hash={digest})")
    return GuardrailPolicy(
        content_hash=digest,
        document=MappingProxyType(parsed),
        text=text,
    )
