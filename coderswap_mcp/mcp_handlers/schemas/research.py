from typing import Annotated, Optional, List
from pydantic import AfterValidator, AnyUrl, BaseModel, Field, TypeAdapter, ValidationError, WithJsonSchema
from .mixins import ProjectIdMixin

_URL = TypeAdapter(AnyUrl)


def _check_url(url: str) -> str:
    # Validate the shape but forward the caller's exact string
    try:
        _URL.validate_python(url)
    except ValidationError:
        raise ValueError(f"not a valid URL: {url!r}") from None
    return url


UrlString = Annotated[
    str,
    AfterValidator(_check_url),
    WithJsonSchema({"type": "string", "format": "uri"}),
]


class ResearchIngestParams(ProjectIdMixin):
    """
    Submit research summary and URLs for web crawling, chunking, embedding, and optional DSL generation.
    """
    research_summary: Optional[str] = Field(
        default=None,
        description="Free-text summary of the research goal and findings."
    )
    urls: List[UrlString] = Field(
        ...,
        min_length=1,
        description="Source URLs to crawl (at least one)."
    )
    intent: Optional[str] = Field(
        default=None,
        description="What the knowledge base will be used for."
    )
    depth: float = Field(
        default=0,
        ge=0,
        le=1,
        description="Crawl depth (0 = listed pages only, 1 = follow links one level)."
    )
    generate_dsl: bool = Field(
        default=True,
        description="Generate ranking DSL after ingestion."
    )


class ResearchIngestOutput(BaseModel):
    job_id: str
    project_id: str
    status: str


class JobStatusParams(BaseModel):
    """
    Check the status of a research ingestion job.
    """
    job_id: str = Field(
        ...,
        min_length=1,
        description="Job identifier returned by coderswap_research_ingest."
    )


class JobStatusOutput(BaseModel):
    job_id: str
    state: str
    crawled_count: Optional[int] = None
    failed_count: Optional[int] = None
