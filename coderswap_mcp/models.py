"""
Backend entities returned by the CoderSwap API, plus the locally built
quality report and session note.

Backend payloads are parsed leniently (unknown fields are kept) since the
backend owns these shapes.
"""

from typing import Optional, Dict, Any, List

from pydantic import BaseModel, ConfigDict, Field


class _BackendModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class Project(_BackendModel):
    project_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[str] = None
    doc_count: Optional[int] = None
    status: Optional[str] = None
    search_mode: Optional[str] = None
    embedding_dim: Optional[int] = None


class IngestJob(_BackendModel):
    job_id: str
    state: str
    crawled_count: Optional[int] = None
    failed_count: Optional[int] = None
    total_tokens: Optional[int] = None
    error_log: Optional[Any] = None
    project_id: Optional[str] = None


class IngestSubmission(_BackendModel):
    """Acknowledgement of a queued research ingest."""
    job_id: str
    status: Optional[str] = None


class SearchResult(_BackendModel):
    score: Optional[float] = Field(default=0.0, description="Relevance score in [0, 1]")
    title: Optional[str] = None
    snippet: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class SearchResponse(_BackendModel):
    results: List[SearchResult] = Field(default_factory=list)
    request_id: Optional[str] = None


class QueryQuality(BaseModel):
    """Per-query row of a search quality report."""
    query: str
    top_score: float
    count: int
    items: List[SearchResult] = Field(default_factory=list)


class QualityAggregate(BaseModel):
    queries_tested: int
    average_top_score: float
    zero_result_queries: List[str] = Field(default_factory=list)


class QualityReport(BaseModel):
    aggregate: QualityAggregate
    results: List[QueryQuality] = Field(default_factory=list)


class SessionNote(BaseModel):
    """
    Ephemeral session note. Built from the request and the current time;
    nothing stores it.
    """
    note_id: str
    project_id: str
    summary_text: str
    job_id: Optional[str] = None
    ingestion_metrics: Optional[Any] = None
    tags: Optional[Any] = None
    timestamp: str
