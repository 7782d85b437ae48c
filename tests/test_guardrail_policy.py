"""
Tests for coderswap_mcp/guardrail_policy.py - integrity check and rendering.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from coderswap_mcp.guardrail_policy import (
    POLICY_SECTIONS,
    PROMPT_HASH,
    PROMPT_PATH,
    PROMPT_TITLE,
    GuardrailPolicyError,
    compute_hash,
    format_value,
    load_guardrail_policy,
    render_prompt,
)


def _write(tmp_path, text, name="prompt.yaml"):
    path = tmp_path / name
    path.write_bytes(text.encode("utf-8"))
    return path, compute_hash(path.read_bytes())


# ============================================================================
# Loading the packaged document
# ============================================================================

class TestPackagedPolicy:

    def test_pinned_hash_matches_packaged_document(self):
        assert compute_hash(PROMPT_PATH.read_bytes()) == PROMPT_HASH

    def test_loads(self, policy):
        assert policy.content_hash == PROMPT_HASH
        assert policy.version == "1.2.0"
        assert policy.last_updated == "2025-10-01"

    def test_header(self, policy):
        assert policy.text.startswith(
            f"{PROMPT_TITLE}\nVersion: 1.2.0 (Last updated 2025-10-01)"
        )

    def test_owners_block(self, policy):
        assert "Owners:\n  - CoderSwap Platform Team (platform@coderswap.ai)" in policy.text

    def test_every_present_section_rendered_in_order(self, policy):
        positions = []
        for key, title in POLICY_SECTIONS:
            if key in policy.document:
                marker = f"== {title.upper()} =="
                assert marker in policy.text
                positions.append(policy.text.index(marker))
        assert positions == sorted(positions)

    def test_idempotent(self):
        first = load_guardrail_policy()
        second = load_guardrail_policy()
        assert first.content_hash == second.content_hash
        assert first.text == second.text

    def test_policy_is_frozen(self, policy):
        with pytest.raises(Exception):
            policy.text = "something else"


# ============================================================================
# Integrity failures
# ============================================================================

class TestIntegrityFailures:

    def test_single_byte_mutation_fails(self, tmp_path):
        raw = bytearray(PROMPT_PATH.read_bytes())
        raw[10] = ord("X") if raw[10] != ord("X") else ord("Y")
        tampered = tmp_path / "tampered.yaml"
        tampered.write_bytes(bytes(raw))

        assert compute_hash(bytes(raw)) != PROMPT_HASH
        with pytest.raises(GuardrailPolicyError, match="hash mismatch"):
            load_guardrail_policy(tampered)

    def test_trailing_newline_changes_hash(self, tmp_path):
        tampered = tmp_path / "tampered.yaml"
        tampered.write_bytes(PROMPT_PATH.read_bytes() + b"\n")
        with pytest.raises(GuardrailPolicyError, match="hash mismatch"):
            load_guardrail_policy(tampered)

    def test_missing_file(self, tmp_path):
        with pytest.raises(GuardrailPolicyError, match="Cannot read"):
            load_guardrail_policy(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path, digest = _write(tmp_path, "version: [unclosed\n")
        with pytest.raises(GuardrailPolicyError, match="not valid YAML"):
            load_guardrail_policy(path, digest)

    @pytest.mark.parametrize("text", ["", "- just\n- a list\n", "plain string\n", "{}\n"])
    def test_non_mapping_or_empty_document(self, tmp_path, text):
        path, digest = _write(tmp_path, text)
        with pytest.raises(GuardrailPolicyError, match="empty or invalid"):
            load_guardrail_policy(path, digest)

    def test_custom_document_with_matching_hash_loads(self, tmp_path):
        path, digest = _write(tmp_path, "version: '9'\nidentity:\n  role: tester\n")
        loaded = load_guardrail_policy(path, digest)
        assert loaded.content_hash == digest
        assert "== IDENTITY ==\n  - role:\n    - tester" in loaded.text


# ============================================================================
# Rendering
# ============================================================================

class TestFormatValue:

    def test_scalar(self):
        assert format_value("hello") == "  - hello"

    def test_none(self):
        assert format_value(None) == "  - (none)"

    def test_empty_list(self):
        assert format_value([]) == "  - (none)"

    def test_empty_mapping(self):
        assert format_value({}) == "  - (empty)"

    def test_booleans_lowercase(self):
        assert format_value([True, False]) == "  - true\n  - false"

    def test_list_of_scalars(self):
        assert format_value(["a", 1, 2.5]) == "  - a\n  - 1\n  - 2.5"

    def test_nested_structures(self):
        value = {"a": [1, {"b": True}], "c": None}
        assert format_value(value) == (
            "  - a:\n"
            "    - 1\n"
            "      - b:\n"
            "        - true\n"
            "  - c:\n"
            "    - (none)"
        )

    def test_null_inside_list_is_indented_placeholder(self):
        assert format_value(["x", None]) == "  - x\n    - (none)"


class TestRenderPrompt:

    def test_defaults_when_header_fields_missing(self):
        text = render_prompt({"identity": "x"})
        assert text.startswith(f"{PROMPT_TITLE}\nVersion: unknown (Last updated unknown)")

    def test_unknown_keys_are_dropped(self):
        text = render_prompt({
            "version": "1",
            "zeta_secret": "hidden-value",
            "workflow": ["plan"],
            "identity": {"role": "assistant"},
        })
        assert "zeta_secret" not in text
        assert "hidden-value" not in text
        assert text.index("== IDENTITY ==") < text.index("== WORKFLOW ==")

    def test_null_sections_skipped(self):
        text = render_prompt({"privacy": None, "workflow": []})
        assert "== PRIVACY ==" not in text
        assert "== WORKFLOW ==\n  - (none)" in text

    def test_owner_without_contact(self):
        text = render_prompt({"owners": [{"name": "Ops"}, {}]})
        assert "Owners:\n  - Ops\n  - Unknown" in text

    def test_description_trimmed(self):
        text = render_prompt({"description": "  spaced out \n"})
        assert "Description:\n  spaced out" in text

    def test_blocks_separated_by_blank_lines(self):
        text = render_prompt({"version": "1", "last_updated": "x", "identity": "a", "privacy": "b"})
        assert text.split("\n\n") == [
            f"{PROMPT_TITLE}\nVersion: 1 (Last updated x)",
            "== IDENTITY ==\n  - a",
            "== PRIVACY ==\n  - b",
        ]
