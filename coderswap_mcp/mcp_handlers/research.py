"""
Research ingestion tools: submit and poll.
"""

from mcp.types import CallToolResult

from coderswap_mcp.logging_utils import get_logger
from .context import GatewayContext
from .decorators import mcp_tool
from .schemas import (
    ResearchIngestParams,
    ResearchIngestOutput,
    JobStatusParams,
    JobStatusOutput,
)
from .utils import SUCCESS_MARKER, dump_output, success_response

logger = get_logger(__name__)


@mcp_tool(
    "coderswap_research_ingest",
    title="CoderSwap Research Ingest",
    description=(
        "Submit research summary and URLs for web crawling, chunking, "
        "embedding, and optional DSL generation"
    ),
    input_model=ResearchIngestParams,
    output_model=ResearchIngestOutput,
    failure_message="Failed to start research ingest",
    guardrail_fields=("project_id", "research_summary", "urls", "intent"),
)
async def handle_research_ingest(params: ResearchIngestParams, ctx: GatewayContext) -> CallToolResult:
    logger.debug(
        f"Starting research ingest project_id={params.project_id} "
        f"url_count={len(params.urls)} generate_dsl={params.generate_dsl}"
    )
    job = await ctx.client.research_ingest(
        project_id=params.project_id,
        urls=params.urls,
        research_summary=params.research_summary,
        intent=params.intent,
        depth=params.depth,
        generate_dsl=params.generate_dsl,
    )

    output = ResearchIngestOutput(job_id=job.job_id, project_id=params.project_id, status="queued")
    logger.info(f"Queued research ingest job: {job.job_id}")

    text = (
        f"{SUCCESS_MARKER} Queued research ingest job: {job.job_id}\n\n"
        f"Crawling {len(params.urls)} URL(s)...\n"
        f"DSL Generation: {'enabled' if params.generate_dsl else 'disabled'}\n\n"
        f"Use coderswap_get_job_status to monitor progress."
    )
    return success_response(text, dump_output(output))


@mcp_tool(
    "coderswap_get_job_status",
    title="Get CoderSwap Job Status",
    description="Check the status of a research ingestion job",
    input_model=JobStatusParams,
    output_model=JobStatusOutput,
    failure_message="Failed to get job status",
)
async def handle_get_job_status(params: JobStatusParams, ctx: GatewayContext) -> CallToolResult:
    logger.debug(f"Checking job status job_id={params.job_id}")
    job = await ctx.client.get_job_status(params.job_id)

    output = JobStatusOutput(
        job_id=job.job_id,
        state=job.state,
        crawled_count=job.crawled_count,
        failed_count=job.failed_count,
    )
    logger.info(f"Job {params.job_id} status: {job.state}")

    lines = [f"Job: {params.job_id}", f"Status: {job.state}"]
    if job.crawled_count is not None:
        lines.append(f"Crawled: {job.crawled_count} documents")
    if job.failed_count:
        lines.append(f"Failed: {job.failed_count} documents")

    return success_response("\n".join(lines), dump_output(output))
