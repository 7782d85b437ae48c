"""
Search tools: hybrid search and the search quality test.
"""

from typing import List

from mcp.types import CallToolResult

from coderswap_mcp.logging_utils import get_logger
from coderswap_mcp.models import SearchResult
from coderswap_mcp.search_quality import run_search_quality_test
from .context import GatewayContext
from .decorators import mcp_tool
from .schemas import (
    SearchParams,
    SearchOutput,
    SearchResultItem,
    ValidateSearchParams,
    ValidateSearchOutput,
)
from .utils import dump_output, success_response

logger = get_logger(__name__)

RANK_MARKERS = ("🥇", "🥈", "🥉")
SNIPPET_PREVIEW_CHARS = 150
TOP_QUERY_ROWS = 3


def _percent(score: float) -> str:
    return f"{(score or 0) * 100:.1f}"


def format_search_results(results: List[SearchResult]) -> str:
    """Ranked, human-readable result blocks separated by blank lines."""
    blocks = []
    for i, r in enumerate(results):
        marker = RANK_MARKERS[i] if i < len(RANK_MARKERS) else f"{i + 1}."
        text = f"{marker} Score: {_percent(r.score)}%"
        if r.title:
            text += f"\n   {r.title}"
        if r.snippet:
            text += f"\n   {r.snippet[:SNIPPET_PREVIEW_CHARS]}..."
        blocks.append(text)
    return "\n\n".join(blocks)


@mcp_tool(
    "coderswap_search",
    title="CoderSwap Hybrid Search",
    description="Execute a hybrid search query against a CoderSwap project using DSL-powered ranking",
    input_model=SearchParams,
    output_model=SearchOutput,
    failure_message="Search failed",
)
async def handle_search(params: SearchParams, ctx: GatewayContext) -> CallToolResult:
    logger.debug(f"Executing search project_id={params.project_id} query={params.query!r} top_k={params.top_k}")
    response = await ctx.client.search(
        project_id=params.project_id,
        query=params.query,
        top_k=params.top_k,
        snippet_length=params.snippet_length,
    )

    shown = response.results[:params.top_k]
    output = SearchOutput(
        query=params.query,
        result_count=len(response.results),
        results=[
            SearchResultItem(
                score=r.score if r.score is not None else 0.0,
                title=r.title,
                snippet=r.snippet,
            )
            for r in shown
        ],
    )

    if not response.results:
        return success_response(f'No results found for: "{params.query}"', dump_output(output))

    logger.info(f"Search returned {len(response.results)} results")
    return success_response(
        f'Found {len(response.results)} result(s) for: "{params.query}"\n\n'
        + format_search_results(shown),
        dump_output(output),
    )


@mcp_tool(
    "coderswap_validate_search",
    title="Validate CoderSwap Search Quality",
    description="Run validation queries to test search quality and coverage (non-DSL quality check)",
    input_model=ValidateSearchParams,
    output_model=ValidateSearchOutput,
    failure_message="Search quality test failed",
)
async def handle_validate_search(params: ValidateSearchParams, ctx: GatewayContext) -> CallToolResult:
    logger.debug(f"Testing search quality project_id={params.project_id} run_full_suite={params.run_full_suite}")
    report = await run_search_quality_test(
        ctx.client,
        params.project_id,
        test_queries=params.test_queries,
        run_full_suite=params.run_full_suite,
    )
    aggregate = report.aggregate

    output = ValidateSearchOutput(
        queries_tested=aggregate.queries_tested,
        average_top_score=aggregate.average_top_score,
        zero_result_queries=aggregate.zero_result_queries,
    )

    summary = f"Search Quality Report\n{'=' * 40}\n"
    summary += f"Queries tested: {aggregate.queries_tested}\n"
    summary += f"Average top score: {_percent(aggregate.average_top_score)}%\n"
    summary += f"Zero-result queries: {len(aggregate.zero_result_queries)}\n\n"

    if report.results:
        summary += "Top Results:\n"
        for row in report.results[:TOP_QUERY_ROWS]:
            summary += f'  • "{row.query}" → {_percent(row.top_score)}% ({row.count} results)\n'

    logger.info(f"Search quality test completed: {aggregate.queries_tested} queries")
    return success_response(summary, dump_output(output))
