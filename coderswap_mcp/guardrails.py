"""
Guardrail bypass detection for free-text tool inputs.

The keyword list is intentionally a flat constant so it can be reviewed
without reading any code.
"""

from typing import Any, Mapping

GUARDRAIL_KEYWORDS = (
    "reset guardrails",
    "disable guardrails",
    "ignore guardrails",
    "bypass guardrails",
    "disable safety",
    "bypass safety",
    "disable protections",
    "turn off protections",
)

GUARDRAIL_VIOLATION_MESSAGE = "✗ Request rejected: system guardrails cannot be bypassed."


def contains_guardrail_bypass(payload: Any) -> bool:
    """
    Recursively check a payload for guardrail bypass phrases.

    Strings are matched case-insensitively; mappings are checked by value,
    sequences element by element. None and other scalars never match.
    Returns on the first hit.
    """
    if payload is None:
        return False
    if isinstance(payload, str):
        lowered = payload.lower()
        return any(keyword in lowered for keyword in GUARDRAIL_KEYWORDS)
    if isinstance(payload, Mapping):
        return any(contains_guardrail_bypass(value) for value in payload.values())
    if isinstance(payload, (list, tuple, set, frozenset)):
        return any(contains_guardrail_bypass(item) for item in payload)
    return False
