"""healthmate: medical report analysis, doctor note tools and a bilingual health chatbot.

Typical in-process use::

    from healthmate import AIService, LLMClient, LLMConfig, WorkflowSession

    ai = AIService(LLMClient(LLMConfig()))
    session = WorkflowSession(ai)

The doctor tools need no provider at all::

    from healthmate import score_note, summarize_note
"""

from __future__ import annotations

from healthmate.chat import ChatSession
from healthmate.core.config import AppSettings, LLMConfig
from healthmate.exceptions import HealthMateError
from healthmate.heuristics import detect_language, score_note, summarize_note
from healthmate.models import (
    ChatReply,
    GeneratedReport,
    Language,
    MedicalAnalysis,
    QualityAssessment,
    ReportData,
    ReportKind,
    SummaryMode,
    SummaryResult,
    WorkflowState,
)
from healthmate.providers import LLMClient
from healthmate.services import AIService, ChatService
from healthmate.workflow import WorkflowSession

__all__ = [
    "AIService",
    "AppSettings",
    "ChatReply",
    "ChatService",
    "ChatSession",
    "GeneratedReport",
    "HealthMateError",
    "LLMClient",
    "LLMConfig",
    "Language",
    "MedicalAnalysis",
    "QualityAssessment",
    "ReportData",
    "ReportKind",
    "SummaryMode",
    "SummaryResult",
    "WorkflowSession",
    "WorkflowState",
    "detect_language",
    "score_note",
    "summarize_note",
]
