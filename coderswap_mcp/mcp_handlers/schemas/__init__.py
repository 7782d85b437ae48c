"""
Pydantic input/output models for every MCP tool.

The JSON schemas advertised in list_tools are generated from these.
"""

from .mixins import ProjectIdMixin
from .projects import (
    CreateProjectParams,
    CreateProjectOutput,
    ListProjectsParams,
    ListProjectsOutput,
    ProjectListItem,
    ProjectStatsParams,
    ProjectStatsOutput,
)
from .research import (
    ResearchIngestParams,
    ResearchIngestOutput,
    JobStatusParams,
    JobStatusOutput,
)
from .search import (
    SearchParams,
    SearchOutput,
    SearchResultItem,
    ValidateSearchParams,
    ValidateSearchOutput,
)
from .session import (
    LogSessionNoteParams,
    LogSessionNoteOutput,
)
