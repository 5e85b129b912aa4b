"""Tests for AIService: prompting, parsing and fallbacks."""

from __future__ import annotations

import json

import pytest

from healthmate.exceptions import EmptyInputError, InvalidReportTypeError, RetryableError
from healthmate.models import ReportData, ReportKind, UrgencyLevel
from healthmate.services.ai_service import (
    DISCLAIMER,
    FALLBACK_QUESTIONS,
    FALLBACK_RECOMMENDATIONS,
    FALLBACK_REPORT_CONTENT,
    AIService,
    with_disclaimer,
)
from tests.fakes.fake_llm_client import FakeLLMClient


class TestAnalyzeReport:
    @pytest.mark.asyncio
    async def test_well_formed_response(self, analysis_json: str):
        client = FakeLLMClient(responses=[analysis_json])
        analysis = await AIService(client).analyze_report("LDL 165 mg/dL, BP 150/95")

        assert analysis.key_findings == ["Elevated blood pressure", "LDL 165 mg/dL"]
        assert analysis.potential_conditions == ["Hypertension", "Hyperlipidemia"]
        assert analysis.urgency_level == UrgencyLevel.MEDIUM
        assert len(analysis.questions) == 3

    @pytest.mark.asyncio
    async def test_prompt_carries_report_and_requests_json(self, analysis_json: str):
        client = FakeLLMClient(responses=[analysis_json])
        await AIService(client).analyze_report("Hemoglobin 9.1 g/dL")

        call = client.calls[0]
        assert "Hemoglobin 9.1 g/dL" in call.prompt
        assert call.json_mode is True

    @pytest.mark.asyncio
    async def test_non_json_response_uses_fallback(self):
        client = FakeLLMClient(responses=["not json"])
        analysis = await AIService(client).analyze_report("some report")

        assert analysis.questions == list(FALLBACK_QUESTIONS)
        assert analysis.key_findings == []
        assert analysis.potential_conditions == []
        assert analysis.urgency_level == UrgencyLevel.MEDIUM

    @pytest.mark.asyncio
    async def test_fenced_response_is_parsed(self, analysis_json: str):
        client = FakeLLMClient(responses=[f"Here you go:\n```json\n{analysis_json}\n```"])
        analysis = await AIService(client).analyze_report("some report")
        assert analysis.potential_conditions == ["Hypertension", "Hyperlipidemia"]

    @pytest.mark.asyncio
    async def test_missing_questions_keeps_findings(self):
        payload = json.dumps({"keyFindings": ["Low iron"], "potentialConditions": ["Anemia"]})
        client = FakeLLMClient(responses=[payload])
        analysis = await AIService(client).analyze_report("Ferritin 8 ng/mL")

        assert analysis.key_findings == ["Low iron"]
        assert analysis.potential_conditions == ["Anemia"]
        assert analysis.questions == list(FALLBACK_QUESTIONS)

    @pytest.mark.asyncio
    async def test_unknown_urgency_defaults_to_medium(self):
        payload = json.dumps({"urgencyLevel": "critical", "questions": ["Any chest pain?"]})
        client = FakeLLMClient(responses=[payload])
        analysis = await AIService(client).analyze_report("Troponin borderline")
        assert analysis.urgency_level == UrgencyLevel.MEDIUM

    @pytest.mark.asyncio
    async def test_snake_case_keys_accepted(self):
        payload = json.dumps(
            {"key_findings": ["A"], "urgency_level": "HIGH", "questions": ["Q?"]}
        )
        analysis = await AIService(FakeLLMClient(responses=[payload])).analyze_report("x")
        assert analysis.key_findings == ["A"]
        assert analysis.urgency_level == UrgencyLevel.HIGH

    @pytest.mark.asyncio
    async def test_empty_text_raises_before_calling_model(self):
        client = FakeLLMClient()
        with pytest.raises(EmptyInputError, match="No text provided"):
            await AIService(client).analyze_report("   ")
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        client = FakeLLMClient(error=RetryableError("provider down"))
        with pytest.raises(RetryableError):
            await AIService(client).analyze_report("some report")


class TestGenerateReport:
    @pytest.mark.asyncio
    async def test_personal_report(self, sample_report_data: ReportData):
        payload = json.dumps({"content": "Your blood pressure is high.", "recommendations": ["Walk daily"]})
        client = FakeLLMClient(responses=[payload])
        report = await AIService(client).generate_personal_report(sample_report_data)

        assert report.content == "Your blood pressure is high."
        assert report.recommendations == ["Walk daily"]

    @pytest.mark.asyncio
    async def test_prompt_includes_note_analysis_and_answers(self, sample_report_data: ReportData):
        client = FakeLLMClient(responses=['{"content": "ok"}'])
        await AIService(client).generate_report("professional", sample_report_data)

        prompt = client.calls[0].prompt
        assert "BP 150/95" in prompt
        assert "keyFindings" in prompt
        assert "Sometimes in the morning" in prompt

    @pytest.mark.asyncio
    async def test_missing_recommendations_get_generic_list(self, sample_report_data: ReportData):
        client = FakeLLMClient(responses=['{"content": "Findings consistent with stage 2 hypertension."}'])
        report = await AIService(client).generate_professional_report(sample_report_data)
        assert report.recommendations == list(FALLBACK_RECOMMENDATIONS[ReportKind.PROFESSIONAL])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", [ReportKind.PERSONAL, ReportKind.PROFESSIONAL])
    async def test_unparseable_report_uses_fallback(self, kind: ReportKind, sample_report_data: ReportData):
        client = FakeLLMClient(responses=["I'm sorry, I can't do that."])
        report = await AIService(client).generate_report(kind, sample_report_data)

        assert report.content == FALLBACK_REPORT_CONTENT[kind]
        assert report.recommendations == list(FALLBACK_RECOMMENDATIONS[kind])

    @pytest.mark.asyncio
    async def test_empty_content_uses_fallback(self, sample_report_data: ReportData):
        client = FakeLLMClient(responses=['{"content": "  ", "recommendations": ["x"]}'])
        report = await AIService(client).generate_report("personal", sample_report_data)
        assert report.content == FALLBACK_REPORT_CONTENT[ReportKind.PERSONAL]

    @pytest.mark.asyncio
    async def test_invalid_kind_raises(self, sample_report_data: ReportData):
        client = FakeLLMClient()
        with pytest.raises(InvalidReportTypeError, match="Invalid report type"):
            await AIService(client).generate_report("summary", sample_report_data)
        assert client.calls == []


class TestDisclaimer:
    def test_appended_to_content(self):
        from healthmate.models import GeneratedReport

        report = with_disclaimer(GeneratedReport(content="Body", recommendations=["A"]))
        assert report.content == f"Body\n\n{DISCLAIMER}"
        assert report.recommendations == ["A"]
