from pydantic import BaseModel, Field


class ProjectIdMixin(BaseModel):
    """Common parameter for tools scoped to one project."""
    project_id: str = Field(
        ...,
        min_length=1,
        description="CoderSwap project identifier (from coderswap_list_projects or coderswap_create_project)."
    )
