"""Tests for the HTTP surface using injected services."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from healthmate.api.app import create_app
from healthmate.api.middleware.error_handler import UNAVAILABLE_MESSAGE
from healthmate.core.config import AppSettings, LLMConfig
from healthmate.exceptions import RetryableError
from healthmate.services import AIService, ChatService
from healthmate.services.ai_service import DISCLAIMER, FALLBACK_QUESTIONS
from tests.fakes.fake_llm_client import FakeLLMClient


def _client(fake: FakeLLMClient | None = None) -> TestClient:
    fake = fake or FakeLLMClient()
    app = create_app(
        AppSettings(llm=LLMConfig(api_key="test-key")),
        ai_service=AIService(fake),
        chat_service=ChatService(fake),
    )
    return TestClient(app)


def _report_data() -> dict:
    return {
        "originalReport": "BP 150/95",
        "analysis": {
            "keyFindings": ["Elevated blood pressure"],
            "potentialConditions": ["Hypertension"],
            "urgencyLevel": "medium",
            "questions": ["Do you smoke?"],
        },
        "patientResponses": {"Do you smoke?": "No"},
    }


class TestHealth:
    def test_probes(self):
        with _client() as client:
            assert client.get("/health").json() == {"status": "ok"}
            resp = client.get("/ready")
            assert resp.status_code == 200
            assert resp.json() == {"status": "ready"}


class TestAnalyzeReport:
    def test_returns_camel_case_analysis(self, analysis_json: str):
        with _client(FakeLLMClient(responses=[analysis_json])) as client:
            resp = client.post("/api/analyze-report", json={"text": "LDL 165 mg/dL"})

        assert resp.status_code == 200
        analysis = resp.json()["analysis"]
        assert analysis["keyFindings"] == ["Elevated blood pressure", "LDL 165 mg/dL"]
        assert analysis["urgencyLevel"] == "medium"
        assert len(analysis["questions"]) == 3

    def test_malformed_model_output_uses_fallback_questions(self):
        with _client(FakeLLMClient(responses=["not json"])) as client:
            resp = client.post("/api/analyze-report", json={"text": "some report"})

        assert resp.status_code == 200
        assert resp.json()["analysis"]["questions"] == list(FALLBACK_QUESTIONS)

    @pytest.mark.parametrize("payload", [{"text": ""}, {"text": "   "}, {}])
    def test_empty_text_is_400(self, payload: dict):
        with _client() as client:
            resp = client.post("/api/analyze-report", json=payload)

        assert resp.status_code == 400
        assert resp.json() == {"error": "No text provided", "type": "empty_input"}

    def test_transport_failure_is_500_with_generic_message(self):
        with _client(FakeLLMClient(error=RetryableError("upstream 503"))) as client:
            resp = client.post("/api/analyze-report", json={"text": "some report"})

        assert resp.status_code == 500
        assert resp.json()["error"] == UNAVAILABLE_MESSAGE
        assert "upstream 503" not in resp.text


class TestGenerateReport:
    def test_appends_disclaimer(self):
        fake = FakeLLMClient(responses=[json.dumps({"content": "Body", "recommendations": ["Walk"]})])
        with _client(fake) as client:
            resp = client.post(
                "/api/generate-report",
                json={"reportData": _report_data(), "reportType": "personal"},
            )

        assert resp.status_code == 200
        report = resp.json()["report"]
        assert report["content"] == f"Body\n\n{DISCLAIMER}"
        assert report["recommendations"] == ["Walk"]

    def test_invalid_report_type_is_400(self):
        with _client() as client:
            resp = client.post(
                "/api/generate-report",
                json={"reportData": _report_data(), "reportType": "summary"},
            )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid report type", "type": "invalid_report_type"}

    def test_missing_report_data_is_400(self):
        with _client() as client:
            resp = client.post("/api/generate-report", json={"reportType": "personal"})

        assert resp.status_code == 400
        assert resp.json()["type"] == "validation_error"
        assert "reportData" in resp.json()["error"]


class TestExport:
    def test_markdown_download(self):
        with _client() as client:
            resp = client.post(
                "/api/report/export",
                json={
                    "report": {"content": "Body", "recommendations": ["Walk"]},
                    "format": "markdown",
                    "reportType": "personal",
                },
            )

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/markdown")
        assert 'filename="personal_report.md"' in resp.headers["content-disposition"]
        assert resp.text.startswith("# Personal Health Report")
        assert "- Walk" in resp.text

    def test_json_download(self):
        with _client() as client:
            resp = client.post(
                "/api/report/export",
                json={"report": {"content": "Body"}, "format": "json"},
            )

        assert resp.status_code == 200
        assert resp.json() == {"content": "Body", "recommendations": []}
        assert 'filename="report.json"' in resp.headers["content-disposition"]

    def test_unknown_format_is_400(self):
        with _client() as client:
            resp = client.post(
                "/api/report/export",
                json={"report": {"content": "Body"}, "format": "pdf"},
            )
        assert resp.status_code == 400


class TestDoctorTools:
    def test_verify(self):
        with _client() as client:
            resp = client.post("/api/verify", json={"text": "Patient reports headache."})

        assert resp.status_code == 200
        body = resp.json()
        assert body["score"] == 1
        assert len(body["issues"]) == 3
        assert len(body["suggestions"]) == 4

    def test_verify_empty_is_400(self):
        with _client() as client:
            resp = client.post("/api/verify", json={"text": ""})
        assert resp.status_code == 400
        assert resp.json()["error"] == "No text provided"

    @pytest.mark.parametrize("mode", ["doctor", "clinician", "Doctor", " CLINICIAN "])
    def test_summary_clinician_aliases(self, mode: str):
        with _client() as client:
            resp = client.post("/api/summary", json={"text": "Stable. Continue.", "mode": mode})

        assert resp.status_code == 200
        assert resp.json()["summary"].startswith("Technical Overview:")

    def test_summary_defaults_to_patient(self):
        with _client() as client:
            resp = client.post("/api/summary", json={"text": "Stable."})

        body = resp.json()
        assert body["summary"].startswith("Summary: Stable.")
        assert {i["label"] for i in body["insights"]} == {
            "Key Values Found",
            "Report Length",
            "Sentence Count",
        }

    def test_summary_unknown_mode_is_400(self):
        with _client() as client:
            resp = client.post("/api/summary", json={"text": "Stable.", "mode": "pharmacist"})
        assert resp.status_code == 400


class TestChatbot:
    def test_answer_with_detected_language(self):
        fake = FakeLLMClient(responses=["आराम करें और पानी पिएं।"])
        with _client(fake) as client:
            resp = client.post("/api/chatbot", json={"question": "mujhe bukhar hai"})

        assert resp.status_code == 200
        assert resp.json() == {"response": "आराम करें और पानी पिएं।", "detectedLanguage": "hi"}
        assert fake.calls[0].model == "fake-chat-model"

    def test_explicit_language_wins(self):
        with _client(FakeLLMClient(responses=["Rest."])) as client:
            resp = client.post("/api/chatbot", json={"question": "mujhe bukhar hai", "language": "en"})
        assert resp.json()["detectedLanguage"] == "en"

    def test_missing_question_is_400(self):
        with _client() as client:
            resp = client.post("/api/chatbot", json={"language": "en"})
        assert resp.status_code == 400
        assert resp.json()["error"] == "Question is required"

    def test_provider_failure_is_500(self):
        with _client(FakeLLMClient(error=RetryableError("down"))) as client:
            resp = client.post("/api/chatbot", json={"question": "Hi?"})
        assert resp.status_code == 500
        assert resp.json()["type"] == "ai_service_error"


class TestStartup:
    def test_placeholder_key_fails_startup(self):
        app = create_app(AppSettings(llm=LLMConfig(provider="openai", api_key="no-key")))
        with pytest.raises(ValueError, match="HEALTHMATE_LLM_API_KEY is required"):
            with TestClient(app):
                pass

    def test_services_built_from_settings(self):
        app = create_app(AppSettings(llm=LLMConfig(provider="ollama", api_key="no-key")))
        with TestClient(app) as client:
            assert isinstance(app.state.ai_service, AIService)
            assert isinstance(app.state.chat_service, ChatService)
            assert client.get("/ready").status_code == 200
