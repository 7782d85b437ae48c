from typing import Optional, List
from pydantic import BaseModel, Field
from .mixins import ProjectIdMixin


class CreateProjectParams(BaseModel):
    """
    Create a new vector search project in CoderSwap.
    """
    name: str = Field(
        ...,
        min_length=1,
        description="Project name."
    )
    description: Optional[str] = Field(
        default=None,
        description="Optional free-text description of the project."
    )


class CreateProjectOutput(BaseModel):
    project_id: str
    name: str
    status: Optional[str] = None


class ListProjectsParams(BaseModel):
    """
    List all CoderSwap projects available to the configured API key. Takes no arguments.
    """


class ProjectListItem(BaseModel):
    project_id: str
    name: Optional[str] = None
    doc_count: Optional[int] = None
    search_mode: Optional[str] = None


class ListProjectsOutput(BaseModel):
    count: int
    projects: List[ProjectListItem] = Field(default_factory=list)


class ProjectStatsParams(ProjectIdMixin):
    """
    Get statistics and information about a specific project.
    """


class ProjectStatsOutput(BaseModel):
    project_id: str
    name: Optional[str] = None
    doc_count: Optional[int] = None
    created_at: Optional[str] = None
