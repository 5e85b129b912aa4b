"""Ports the workflow and chatbot sessions call out through."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from healthmate.models import ChatReply, GeneratedReport, Language, MedicalAnalysis, ReportData, ReportKind


@runtime_checkable
class ReportAnalysisPort(Protocol):
    """Analysis + report generation.

    Satisfied in-process by ``AIService`` and over HTTP by ``HealthMateAPIClient``.
    """

    async def analyze_report(self, text: str) -> MedicalAnalysis: ...

    async def generate_report(self, kind: ReportKind | str, data: ReportData) -> GeneratedReport: ...


@runtime_checkable
class ChatResponder(Protocol):
    """One chatbot round trip.

    Satisfied in-process by ``ChatService`` and over HTTP by ``HealthMateAPIClient``.
    """

    async def answer(
        self,
        question: str,
        language: Language | str | None = None,
        context: str = ...,
    ) -> ChatReply: ...
