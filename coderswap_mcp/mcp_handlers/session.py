"""
Session note tool. Purely local: never calls the backend, never persists.
"""

from mcp.types import CallToolResult

from coderswap_mcp.logging_utils import get_logger
from coderswap_mcp.session_notes import build_session_note, preview
from .context import GatewayContext
from .decorators import mcp_tool
from .schemas import LogSessionNoteParams, LogSessionNoteOutput
from .utils import SUCCESS_MARKER, dump_output, success_response

logger = get_logger(__name__)


@mcp_tool(
    "coderswap_log_session_note",
    title="Log Session Note",
    description="Record lightweight ingestion summary for session continuity (non-DSL)",
    input_model=LogSessionNoteParams,
    output_model=LogSessionNoteOutput,
    failure_message="Failed to log session note",
    guardrail_fields=("project_id", "summary_text", "job_id", "ingestion_metrics", "tags"),
)
async def handle_log_session_note(params: LogSessionNoteParams, ctx: GatewayContext) -> CallToolResult:
    logger.debug(f"Logging session note project_id={params.project_id} job_id={params.job_id}")
    note = build_session_note(
        project_id=params.project_id,
        summary_text=params.summary_text,
        job_id=params.job_id,
        ingestion_metrics=params.ingestion_metrics,
        tags=params.tags,
    )

    logger.info(f"Session note logged for project {note.project_id}: {note.model_dump_json()}")

    output = LogSessionNoteOutput(note_id=note.note_id, project_id=note.project_id, timestamp=note.timestamp)
    return success_response(
        f"{SUCCESS_MARKER} Logged session note: {preview(params.summary_text)}",
        dump_output(output),
    )
