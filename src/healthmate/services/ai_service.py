"""AI service adapter: prompt construction, response parsing and fallbacks.

Every operation follows the same four steps: build the prompt, call the
model in JSON mode, parse the text with ``extract_json``, validate it against
a lenient response schema.  When parsing or validation fails the adapter
returns a static, clearly generic fallback instead of raising, so callers
only ever see transport errors (``LLMClientError``).
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from healthmate.exceptions import EmptyInputError, InvalidReportTypeError
from healthmate.models import GeneratedReport, MedicalAnalysis, ReportData, ReportKind, UrgencyLevel
from healthmate.prompts import get_prompt
from healthmate.providers.protocols import ICompletionClient

log = logging.getLogger(__name__)

DISCLAIMER = (
    "**DISCLAIMER: This is an AI-generated report and should not replace professional "
    "medical advice. Please consult with qualified healthcare providers for medical decisions.**"
)

FALLBACK_QUESTIONS: tuple[str, ...] = (
    "How long have you been experiencing the symptoms or issues mentioned in your report?",
    "Are you currently taking any medications or receiving treatment for this condition?",
    "Have you noticed anything that makes your symptoms better or worse?",
)

FALLBACK_REPORT_CONTENT: dict[ReportKind, str] = {
    ReportKind.PERSONAL: (
        "We could not prepare a detailed personal report from your information this time. "
        "Your report and answers have been reviewed only in general terms. Please share your "
        "medical report with your doctor or healthcare provider, who can explain what it means "
        "for you and what to do next. If you feel very unwell, have severe pain, trouble "
        "breathing, or your symptoms are getting worse quickly, seek medical attention right away."
    ),
    ReportKind.PROFESSIONAL: (
        "Automated report generation did not return a usable clinical summary. "
        "The source report, structured analysis and patient responses should be reviewed "
        "directly by the treating clinician. Correlate findings with history, examination "
        "and relevant investigations before establishing a differential diagnosis or "
        "management plan."
    ),
}

FALLBACK_RECOMMENDATIONS: dict[ReportKind, tuple[str, ...]] = {
    ReportKind.PERSONAL: (
        "Book an appointment with your healthcare provider to go over your report.",
        "Keep a note of your symptoms, when they happen and what helps.",
        "Seek urgent care if your symptoms suddenly get worse.",
    ),
    ReportKind.PROFESSIONAL: (
        "Review the original report and patient responses in a clinical consultation.",
        "Order further investigations as clinically indicated.",
        "Arrange follow-up to reassess symptoms and response to any treatment.",
    ),
}

_PROMPT_NAMES: dict[ReportKind, str] = {
    ReportKind.PERSONAL: "PERSONAL_REPORT_PROMPT",
    ReportKind.PROFESSIONAL: "PROFESSIONAL_REPORT_PROMPT",
}


def _string_list(value: Any) -> list[str]:
    """Coerce a model-produced value into a list of non-empty strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, (list, tuple)):
        items = []
        for item in value:
            if isinstance(item, (str, int, float)) and str(item).strip():
                items.append(str(item).strip())
        return items
    return []


# ── Response schemas (lenient on shape, strict on required content) ──


class _AnalysisResponse(BaseModel):
    keyFindings: list[str] = []
    potentialConditions: list[str] = []
    urgencyLevel: UrgencyLevel = UrgencyLevel.MEDIUM
    questions: list[str]

    @field_validator("keyFindings", "potentialConditions", "questions", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> list[str]:
        return _string_list(value)

    @field_validator("questions")
    @classmethod
    def _require_questions(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("analysis contains no questions")
        return value

    @field_validator("urgencyLevel", mode="before")
    @classmethod
    def _coerce_urgency(cls, value: Any) -> UrgencyLevel:
        try:
            return UrgencyLevel(str(value).strip().lower())
        except ValueError:
            return UrgencyLevel.MEDIUM


class _ReportResponse(BaseModel):
    content: str
    recommendations: list[str] = []

    @field_validator("content", mode="before")
    @classmethod
    def _require_content(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("report content is empty")
        return value.strip()

    @field_validator("recommendations", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> list[str]:
        return _string_list(value)


def _normalize_keys(parsed: dict[str, Any]) -> dict[str, Any]:
    """Accept snake_case keys from models that ignore the requested casing."""
    aliases = {
        "key_findings": "keyFindings",
        "potential_conditions": "potentialConditions",
        "urgency_level": "urgencyLevel",
        "urgency": "urgencyLevel",
    }
    return {aliases.get(k, k): v for k, v in parsed.items()}


def fallback_analysis() -> MedicalAnalysis:
    return MedicalAnalysis(
        key_findings=[],
        potential_conditions=[],
        urgency_level=UrgencyLevel.MEDIUM,
        questions=list(FALLBACK_QUESTIONS),
    )


def fallback_report(kind: ReportKind) -> GeneratedReport:
    return GeneratedReport(
        content=FALLBACK_REPORT_CONTENT[kind],
        recommendations=list(FALLBACK_RECOMMENDATIONS[kind]),
    )


def with_disclaimer(report: GeneratedReport) -> GeneratedReport:
    """Return a copy of *report* with the AI disclaimer appended to its content."""
    return report.model_copy(update={"content": f"{report.content}\n\n{DISCLAIMER}"})


class AIService:
    """Analyze reports and generate personal/professional reports via an LLM."""

    def __init__(self, client: ICompletionClient) -> None:
        self._client = client

    async def analyze_report(self, text: str) -> MedicalAnalysis:
        """Extract findings, conditions, urgency and follow-up questions.

        Raises:
            EmptyInputError: If *text* is empty or whitespace-only.
            LLMClientError: On transport failure.
        """
        if not text or not text.strip():
            raise EmptyInputError("No text provided")

        prompt = get_prompt("analysis", "ANALYZE_REPORT_PROMPT").format(report_text=text)
        raw = await self._client.complete(prompt, json_mode=True)
        return self.parse_analysis(self._client.extract_json(raw))

    def parse_analysis(self, parsed: Any) -> MedicalAnalysis:
        """Validate a parsed model response, substituting the fallback on failure."""
        if not isinstance(parsed, dict):
            log.warning("Analysis response is not a JSON object; using fallback analysis")
            return fallback_analysis()
        try:
            payload = _AnalysisResponse.model_validate(_normalize_keys(parsed))
        except ValidationError as exc:
            log.warning(
                "Analysis response failed validation; using fallback questions",
                extra={"errors": exc.error_count()},
            )
            analysis = fallback_analysis()
            analysis.key_findings = _string_list(parsed.get("keyFindings", parsed.get("key_findings")))
            analysis.potential_conditions = _string_list(
                parsed.get("potentialConditions", parsed.get("potential_conditions"))
            )
            return analysis

        return MedicalAnalysis(
            key_findings=payload.keyFindings,
            potential_conditions=payload.potentialConditions,
            urgency_level=payload.urgencyLevel,
            questions=payload.questions,
        )

    async def generate_report(self, kind: ReportKind | str, data: ReportData) -> GeneratedReport:
        """Generate a report for *kind* from the note, analysis and answers.

        Raises:
            InvalidReportTypeError: If *kind* is not personal/professional.
            LLMClientError: On transport failure.
        """
        try:
            kind = ReportKind(kind)
        except ValueError as exc:
            raise InvalidReportTypeError("Invalid report type") from exc

        prompt = get_prompt("report", _PROMPT_NAMES[kind]).format(
            original_report=data.original_report,
            analysis_json=data.analysis.model_dump_json(by_alias=True),
            responses_json=json.dumps(data.patient_responses, ensure_ascii=False),
        )
        raw = await self._client.complete(prompt, json_mode=True)
        return self.parse_report(kind, self._client.extract_json(raw))

    async def generate_personal_report(self, data: ReportData) -> GeneratedReport:
        return await self.generate_report(ReportKind.PERSONAL, data)

    async def generate_professional_report(self, data: ReportData) -> GeneratedReport:
        return await self.generate_report(ReportKind.PROFESSIONAL, data)

    def parse_report(self, kind: ReportKind, parsed: Any) -> GeneratedReport:
        """Validate a parsed report response, substituting the fallback on failure."""
        if not isinstance(parsed, dict):
            log.warning("Report response is not a JSON object; using fallback %s report", kind.value)
            return fallback_report(kind)
        try:
            payload = _ReportResponse.model_validate(parsed)
        except ValidationError:
            log.warning("Report response has no content; using fallback %s report", kind.value)
            return fallback_report(kind)

        recommendations = payload.recommendations or list(FALLBACK_RECOMMENDATIONS[kind])
        return GeneratedReport(content=payload.content, recommendations=recommendations)
