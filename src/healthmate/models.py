"""Pydantic data models for healthmate.

Wire formats use the camelCase field names the web client sends and
expects (``keyFindings``, ``patientResponses`` ...); Python code uses the
snake_case attribute names.  Both spellings are accepted on input.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# ── Enums ────────────────────────────────────────────────────────────


class UrgencyLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ReportKind(str, Enum):
    """Audience of a generated report."""

    PERSONAL = "personal"
    PROFESSIONAL = "professional"


class SummaryMode(str, Enum):
    """Audience of a heuristic summary.

    Lookup ignores case and surrounding whitespace.  ``doctor`` is accepted
    for clinician; a blank string means the patient default.
    """

    PATIENT = "patient"
    CLINICIAN = "clinician"

    @classmethod
    def _missing_(cls, value: object) -> Optional["SummaryMode"]:
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        if not key:
            return cls.PATIENT
        if key == "doctor":
            return cls.CLINICIAN
        for member in cls:
            if member.value == key:
                return member
        return None


class Language(str, Enum):
    EN = "en"
    HI = "hi"


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class WorkflowState(str, Enum):
    """Screens of the report-analysis workflow, in traversal order."""

    PROFILE = "profile"
    UPLOAD = "upload"
    QUESTIONS = "questions"
    REPORT_TYPE = "report-type"
    FINAL_REPORT = "final-report"


# ── Doctor tools ─────────────────────────────────────────────────────


class QualityAssessment(BaseModel):
    """Heuristic quality score for a clinical note."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    issues: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class Insight(BaseModel):
    label: str
    value: str
    trend: Optional[str] = None


class SummaryResult(BaseModel):
    """Extractive summary plus a few numeric/length insights."""

    summary: str
    insights: list[Insight] = Field(default_factory=list)


# ── Patient workflow ─────────────────────────────────────────────────

AnswerMap = dict[str, str]


class MedicalAnalysis(BaseModel):
    """Structured result of the first AI call; drives the question phase."""

    model_config = ConfigDict(populate_by_name=True)

    key_findings: list[str] = Field(default_factory=list, alias="keyFindings")
    potential_conditions: list[str] = Field(default_factory=list, alias="potentialConditions")
    urgency_level: UrgencyLevel = Field(default=UrgencyLevel.MEDIUM, alias="urgencyLevel")
    questions: list[str] = Field(default_factory=list)


class ReportData(BaseModel):
    """Everything the second AI call needs: note, analysis and answers."""

    model_config = ConfigDict(populate_by_name=True)

    patient_responses: AnswerMap = Field(default_factory=dict, alias="patientResponses")
    original_report: str = Field(alias="originalReport")
    analysis: MedicalAnalysis


class GeneratedReport(BaseModel):
    content: str
    recommendations: list[str] = Field(default_factory=list)


# ── Chatbot ──────────────────────────────────────────────────────────


class ChatMessage(BaseModel):
    """One transcript entry.  Immutable once appended."""

    model_config = ConfigDict(frozen=True)

    role: ChatRole
    content: str


class ChatReply(BaseModel):
    """Assistant answer plus the language it was produced in."""

    model_config = ConfigDict(populate_by_name=True)

    response: str
    detected_language: Language = Field(default=Language.EN, alias="detectedLanguage")
