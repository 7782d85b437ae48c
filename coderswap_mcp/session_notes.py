"""
Session notes.

A note is a pure function of the request plus the current time. Nothing is
written anywhere: the note exists only in the tool response and the log
line. Do not add storage here; durability belongs to the backend, if
anywhere.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from .models import SessionNote

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def build_session_note(
    project_id: str,
    summary_text: str,
    job_id: Optional[str] = None,
    ingestion_metrics: Optional[Any] = None,
    tags: Optional[Any] = None,
    now: Optional[datetime] = None,
) -> SessionNote:
    """Create an ephemeral note stamped with ``now`` (UTC by default)."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)

    return SessionNote(
        note_id=f"note_{(now - _EPOCH) // timedelta(milliseconds=1)}",
        project_id=project_id,
        summary_text=summary_text,
        job_id=job_id,
        ingestion_metrics=ingestion_metrics,
        tags=tags,
        timestamp=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )


def preview(summary_text: str, limit: int = 100) -> str:
    """First ``limit`` characters, with an ellipsis when truncated."""
    if len(summary_text) > limit:
        return summary_text[:limit] + "..."
    return summary_text
