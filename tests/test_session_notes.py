"""
Tests for coderswap_mcp/session_notes.py
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from coderswap_mcp.session_notes import build_session_note, preview

FIXED = datetime(2025, 10, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)


class TestBuildSessionNote:

    def test_id_and_timestamp_from_clock(self):
        note = build_session_note("proj_a", "summary", now=FIXED)

        assert note.note_id == "note_1759321845123"
        assert note.timestamp == "2025-10-01T12:30:45.123Z"

    def test_echoes_request(self):
        note = build_session_note(
            "proj_a",
            "summary",
            job_id="job_1",
            ingestion_metrics={"crawled": 3},
            tags=["a", "b"],
            now=FIXED,
        )
        assert note.project_id == "proj_a"
        assert note.summary_text == "summary"
        assert note.job_id == "job_1"
        assert note.ingestion_metrics == {"crawled": 3}
        assert note.tags == ["a", "b"]

    def test_optional_fields_default_to_none(self):
        note = build_session_note("proj_a", "summary", now=FIXED)
        assert note.job_id is None
        assert note.ingestion_metrics is None
        assert note.tags is None

    def test_non_utc_clock_normalized(self):
        local = FIXED.astimezone(timezone(timedelta(hours=2)))
        note = build_session_note("proj_a", "summary", now=local)
        assert note.timestamp == "2025-10-01T12:30:45.123Z"

    def test_naive_clock_treated_as_utc(self):
        note = build_session_note("proj_a", "summary", now=FIXED.replace(tzinfo=None))
        assert note.timestamp == "2025-10-01T12:30:45.123Z"

    def test_default_clock(self):
        note = build_session_note("proj_a", "summary")
        assert note.note_id.startswith("note_")
        assert note.timestamp.endswith("Z")


class TestPreview:

    def test_short_text_unchanged(self):
        assert preview("short") == "short"

    def test_exactly_limit_unchanged(self):
        assert preview("x" * 100) == "x" * 100

    def test_truncated_with_ellipsis(self):
        assert preview("x" * 101) == "x" * 100 + "..."
