"""
CoderSwap backend client.

Thin async HTTP translation layer: one request per operation, API key on
every request, uniform error extraction. A fresh httpx.AsyncClient is
opened per call so concurrent tool invocations share no connection state.
No retries; failures surface immediately.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

import httpx

from .models import IngestJob, IngestSubmission, Project, SearchResponse
from .logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_EMBEDDING_DIM = 384
DEFAULT_TOP_K = 5
DEFAULT_SNIPPET_LENGTH = 200


class CoderSwapError(Exception):
    """Base class for backend failures."""


class CoderSwapAPIError(CoderSwapError):
    """Non-success HTTP response from the backend."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"CoderSwap API error ({status_code}): {detail}")


class ProjectNotFoundError(CoderSwapError):
    """Project listing succeeded but did not contain the requested id."""

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project {project_id} not found")


def extract_error_detail(body: str) -> str:
    """
    Pull a readable message out of an error body.

    Prefers "detail", then "errors", then "message"; falls back to the raw
    text when the body is not JSON or has none of those keys.
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError):
        return body
    if not isinstance(data, dict):
        return body
    if data.get("detail"):
        detail = data["detail"]
        return detail if isinstance(detail, str) else json.dumps(detail)
    if data.get("errors"):
        return json.dumps(data["errors"])
    if data.get("message"):
        return str(data["message"])
    return body


class CoderSwapClient:
    """Async client for the CoderSwap REST API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        # Test seam: httpx.MockTransport in tests, real network otherwise
        self._transport = transport

    @property
    def auth_headers(self) -> Dict[str, str]:
        return {"X-API-Key": self._api_key}

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.auth_headers,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        async with self._client() as client:
            response = await client.request(method, path, **kwargs)
        return self._handle_response(response)

    @staticmethod
    def _handle_response(response: httpx.Response) -> Any:
        if not response.is_success:
            detail = extract_error_detail(response.text)
            logger.debug(f"Backend returned {response.status_code} for {response.request.url}: {detail}")
            raise CoderSwapAPIError(response.status_code, detail)
        return response.json()

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def create_project(self, name: str, description: Optional[str] = None) -> Project:
        payload: Dict[str, Any] = {"name": name, "embedding_dim": DEFAULT_EMBEDDING_DIM}
        if description is not None:
            payload["description"] = description
        data = await self._request("POST", "/v1/projects", json=payload)
        return Project.model_validate(data)

    async def list_projects(self) -> List[Project]:
        data = await self._request("GET", "/v1/projects")
        projects = data.get("projects") if isinstance(data, dict) else None
        if not isinstance(projects, list):
            return []
        return [Project.model_validate(p) for p in projects]

    async def get_project_stats(self, project_id: str) -> Project:
        """
        Look up one project by listing all of them and scanning.

        The backend has no single-project endpoint in use here, so absence
        is a domain-level ProjectNotFoundError, not an HTTP failure.
        """
        for project in await self.list_projects():
            if project.project_id == project_id:
                return project
        raise ProjectNotFoundError(project_id)

    # ------------------------------------------------------------------
    # Research ingestion
    # ------------------------------------------------------------------

    async def research_ingest(
        self,
        project_id: str,
        urls: Sequence[str],
        research_summary: Optional[str] = None,
        intent: Optional[str] = None,
        depth: float = 0,
        generate_dsl: bool = True,
    ) -> IngestSubmission:
        # multipart/form-data: repeated "urls" parts plus free text
        form: List[tuple] = [
            ("project_id", project_id),
            ("generate_dsl", "true" if generate_dsl else "false"),
            ("depth", _form_number(depth)),
        ]
        if research_summary:
            form.append(("research_summary", research_summary))
        if intent:
            form.append(("intent", intent))
        form.extend(("urls", url) for url in urls)

        files = [(key, (None, value)) for key, value in form]
        data = await self._request("POST", "/research/ingest", files=files)
        return IngestSubmission.model_validate(data)

    async def get_job_status(self, job_id: str) -> IngestJob:
        data = await self._request("GET", f"/research/jobs/{job_id}")
        return IngestJob.model_validate(data["job"])

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(
        self,
        project_id: str,
        query: str,
        top_k: int = DEFAULT_TOP_K,
        snippet_length: int = DEFAULT_SNIPPET_LENGTH,
    ) -> SearchResponse:
        data = await self._request(
            "POST",
            "/v1/search",
            json={
                "project_id": project_id,
                "query": query,
                "snippet_length": snippet_length,
                "settings": {"k": top_k},
            },
        )
        return SearchResponse.model_validate(data)


def _form_number(value: float) -> str:
    # 0.0 -> "0", 0.5 -> "0.5"
    return str(int(value)) if float(value).is_integer() else str(value)
