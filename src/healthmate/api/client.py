"""Async httpx client for the HealthMate HTTP API.

Satisfies ``ReportAnalysisPort`` and ``ChatResponder`` so a
``WorkflowSession`` or ``ChatSession`` can run against a remote server
exactly as it runs against the in-process services.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from healthmate.exceptions import UpstreamServiceError
from healthmate.models import (
    ChatReply,
    GeneratedReport,
    Language,
    MedicalAnalysis,
    ReportData,
    ReportKind,
)
from healthmate.services.chat_service import DEFAULT_CONTEXT

log = logging.getLogger(__name__)


class HealthMateAPIClient:
    """Calls ``/api/analyze-report``, ``/api/generate-report`` and ``/api/chatbot``.

    Non-2xx responses raise ``UpstreamServiceError`` carrying the server's
    ``error`` message and status code.  Connection failures raise the same
    error with ``status_code=0``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        *,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> HealthMateAPIClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self._client.post(path, json=payload)
        except httpx.RequestError as exc:
            log.warning("Request to %s failed: %s", path, exc)
            raise UpstreamServiceError(f"Unable to reach server: {exc}") from exc

        if response.is_error:
            raise UpstreamServiceError(_error_message(response), status_code=response.status_code)
        return response.json()

    async def analyze_report(self, text: str) -> MedicalAnalysis:
        body = await self._post("/api/analyze-report", {"text": text})
        return MedicalAnalysis.model_validate(body.get("analysis") or {})

    async def generate_report(self, kind: ReportKind | str, data: ReportData) -> GeneratedReport:
        kind_value = kind.value if isinstance(kind, ReportKind) else kind
        body = await self._post(
            "/api/generate-report",
            {"reportData": data.model_dump(by_alias=True, mode="json"), "reportType": kind_value},
        )
        return GeneratedReport.model_validate(body.get("report") or {"content": ""})

    async def answer(
        self,
        question: str,
        language: Language | str | None = None,
        context: str = DEFAULT_CONTEXT,
    ) -> ChatReply:
        payload: dict[str, Any] = {"question": question, "context": context}
        if language:
            payload["language"] = Language(language).value
        body = await self._post("/api/chatbot", payload)
        return ChatReply.model_validate(body)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {response.status_code}"
