from typing import Optional, List
from pydantic import BaseModel, Field
from .mixins import ProjectIdMixin


class SearchParams(ProjectIdMixin):
    """
    Execute a hybrid search query against a CoderSwap project using DSL-powered ranking.
    """
    query: str = Field(
        ...,
        min_length=1,
        description="Search query text."
    )
    top_k: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Maximum number of results to return (1-50)."
    )
    snippet_length: int = Field(
        default=200,
        ge=50,
        le=1000,
        description="Snippet length in characters (50-1000)."
    )


class SearchResultItem(BaseModel):
    score: float
    title: Optional[str] = None
    snippet: Optional[str] = None


class SearchOutput(BaseModel):
    query: str
    result_count: int
    results: List[SearchResultItem] = Field(default_factory=list)


class ValidateSearchParams(ProjectIdMixin):
    """
    Run validation queries to test search quality and coverage (non-DSL quality check).
    """
    test_queries: Optional[List[str]] = Field(
        default=None,
        description="Queries to probe with. Duplicates are dropped."
    )
    run_full_suite: bool = Field(
        default=False,
        description="Use the built-in five-query probe suite instead of test_queries."
    )


class ValidateSearchOutput(BaseModel):
    queries_tested: int
    average_top_score: float
    zero_result_queries: List[str] = Field(default_factory=list)
