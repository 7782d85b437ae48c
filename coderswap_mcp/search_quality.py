"""
Search quality aggregation.

Runs a batch of probe queries against one project, one at a time and in
submitted order, and reduces them into relevance statistics.
"""

from typing import Iterable, List, Optional

from .coderswap_client import CoderSwapClient
from .models import QualityAggregate, QualityReport, QueryQuality, SearchResult
from .logging_utils import get_logger

logger = get_logger(__name__)

PROBE_SUITE = (
    "what is hybrid search",
    "how to implement rag",
    "error troubleshooting vector search",
    "bm25 algorithm",
    "semantic vs keyword search",
)


class NoQueriesError(ValueError):
    """Raised when a quality test resolves to an empty query list."""


def resolve_queries(test_queries: Optional[Iterable[str]], run_full_suite: bool) -> List[str]:
    """Pick the query list and drop duplicates, keeping first occurrences."""
    queries = PROBE_SUITE if run_full_suite else (test_queries or ())
    unique = list(dict.fromkeys(queries))
    if not unique:
        raise NoQueriesError("No queries provided for search quality test")
    return unique


def _score(result: SearchResult) -> float:
    return result.score or 0.0


def summarize(results: List[QueryQuality]) -> QualityAggregate:
    """Reduce per-query rows into the aggregate statistics."""
    return QualityAggregate(
        queries_tested=len(results),
        average_top_score=sum(r.top_score for r in results) / max(len(results), 1),
        zero_result_queries=[r.query for r in results if r.count == 0],
    )


async def run_search_quality_test(
    client: CoderSwapClient,
    project_id: str,
    test_queries: Optional[Iterable[str]] = None,
    run_full_suite: bool = False,
) -> QualityReport:
    """
    Execute each query sequentially and build a QualityReport.

    A failure on any query fails the whole test; there is no partial report.
    """
    queries = resolve_queries(test_queries, run_full_suite)
    logger.debug(f"Running {len(queries)} quality probe(s) against {project_id}")

    rows: List[QueryQuality] = []
    for query in queries:
        response = await client.search(project_id=project_id, query=query)
        # sorted() is stable, so ties keep the backend's order
        ranked = sorted(response.results, key=_score, reverse=True)
        rows.append(QueryQuality(
            query=query,
            top_score=_score(ranked[0]) if ranked else 0.0,
            count=len(ranked),
            items=ranked,
        ))

    return QualityReport(aggregate=summarize(rows), results=rows)
