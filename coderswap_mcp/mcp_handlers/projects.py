"""
Project tools: create, list, stats.
"""

from mcp.types import CallToolResult

from coderswap_mcp.logging_utils import get_logger
from .context import GatewayContext
from .decorators import mcp_tool
from .schemas import (
    CreateProjectParams,
    CreateProjectOutput,
    ListProjectsParams,
    ListProjectsOutput,
    ProjectListItem,
    ProjectStatsParams,
    ProjectStatsOutput,
)
from .utils import SUCCESS_MARKER, dump_output, success_response

logger = get_logger(__name__)


@mcp_tool(
    "coderswap_create_project",
    title="Create CoderSwap Project",
    description="Create a new vector search project in CoderSwap",
    input_model=CreateProjectParams,
    output_model=CreateProjectOutput,
    failure_message="Failed to create project",
)
async def handle_create_project(params: CreateProjectParams, ctx: GatewayContext) -> CallToolResult:
    logger.debug(f"Creating project name={params.name!r}")
    project = await ctx.client.create_project(params.name, params.description)

    output = CreateProjectOutput(
        project_id=project.project_id,
        name=project.name or params.name,
        status=project.status,
    )
    logger.info(f"Created project: {project.project_id}")

    return success_response(
        f'{SUCCESS_MARKER} Created project "{params.name}" (ID: {project.project_id})',
        dump_output(output),
    )


@mcp_tool(
    "coderswap_list_projects",
    title="List CoderSwap Projects",
    description="List all CoderSwap projects available to your API key",
    input_model=ListProjectsParams,
    output_model=ListProjectsOutput,
    failure_message="Failed to list projects",
)
async def handle_list_projects(params: ListProjectsParams, ctx: GatewayContext) -> CallToolResult:
    logger.debug("Listing projects")
    projects = await ctx.client.list_projects()

    output = ListProjectsOutput(
        count=len(projects),
        projects=[
            ProjectListItem(
                project_id=p.project_id,
                name=p.name,
                doc_count=p.doc_count,
                search_mode=p.search_mode,
            )
            for p in projects
        ],
    )

    if not projects:
        return success_response("No projects found", dump_output(output))

    blocks = []
    for p in projects:
        lines = [
            f"• {p.name or 'Untitled Project'}",
            f"  ID: {p.project_id}",
            f"  Docs: {p.doc_count if p.doc_count is not None else 0}",
        ]
        if p.search_mode:
            lines.append(f"  Search Mode: {p.search_mode}")
        blocks.append("\n".join(lines))

    logger.info(f"Found {len(projects)} projects")
    return success_response(
        f"Found {len(projects)} project(s):\n\n" + "\n\n".join(blocks),
        dump_output(output),
    )


@mcp_tool(
    "coderswap_get_project_stats",
    title="Get CoderSwap Project Stats",
    description="Get statistics and information about a specific project",
    input_model=ProjectStatsParams,
    output_model=ProjectStatsOutput,
    failure_message="Failed to get project stats",
)
async def handle_get_project_stats(params: ProjectStatsParams, ctx: GatewayContext) -> CallToolResult:
    logger.debug(f"Getting project stats project_id={params.project_id}")
    stats = await ctx.client.get_project_stats(params.project_id)

    output = ProjectStatsOutput(
        project_id=stats.project_id,
        name=stats.name,
        doc_count=stats.doc_count,
        created_at=stats.created_at,
    )
    logger.info(f"Retrieved stats for project: {params.project_id}")

    return success_response(
        f"Project: {stats.name or params.project_id}\n"
        f"Documents: {stats.doc_count or 0}\n"
        f"Created: {stats.created_at or 'Unknown'}",
        dump_output(output),
    )
