from typing import Optional, Any
from pydantic import BaseModel, Field
from .mixins import ProjectIdMixin


class LogSessionNoteParams(ProjectIdMixin):
    """
    Record lightweight ingestion summary for session continuity (non-DSL).
    """
    summary_text: str = Field(
        ...,
        min_length=1,
        description="What happened in this session."
    )
    job_id: Optional[str] = Field(
        default=None,
        description="Related ingestion job, if any."
    )
    ingestion_metrics: Optional[Any] = Field(
        default=None,
        description="Free-form metrics (counts, scores) to attach."
    )
    tags: Optional[Any] = Field(
        default=None,
        description="Free-form tags."
    )


class LogSessionNoteOutput(BaseModel):
    note_id: str
    project_id: str
    timestamp: str
