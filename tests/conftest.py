"""Shared fixtures for healthmate tests."""

from __future__ import annotations

import json

import pytest

from healthmate.core.config import LLMConfig
from healthmate.models import MedicalAnalysis, ReportData, UrgencyLevel
from healthmate.prompts import reset as reset_prompts


@pytest.fixture(autouse=True)
def _fresh_prompt_registry():
    """Each test resolves prompts through a freshly configured registry."""
    reset_prompts()
    yield
    reset_prompts()


@pytest.fixture
def llm_config() -> LLMConfig:
    """Test LLM settings: fast retries, no real key."""
    return LLMConfig(
        provider="openai",
        api_key="test-key",
        model="gpt-4o",
        chat_model="gemini/gemini-1.5-flash",
        max_retries=1,
        retry_max_delay=0.0,
    )


@pytest.fixture
def clinical_note() -> str:
    """A note with assessment, plan and vitals sections."""
    return (
        "Patient is a 54 year old male presenting with chest discomfort for 2 days. "
        "Vitals: BP 150/95, HR 88, Temp 98.6F, SpO2 97%. "
        "Assessment: Likely stable angina, rule out acute coronary syndrome. "
        "Plan: ECG, troponin at 0 and 3 hours, start aspirin 81 mg daily. "
        "Follow up in cardiology clinic within one week."
    )


@pytest.fixture
def analysis_json() -> str:
    """A well-formed analysis response as the model would return it."""
    return json.dumps(
        {
            "keyFindings": ["Elevated blood pressure", "LDL 165 mg/dL"],
            "potentialConditions": ["Hypertension", "Hyperlipidemia"],
            "urgencyLevel": "medium",
            "questions": [
                "Do you experience headaches?",
                "How often do you exercise?",
                "Do you smoke?",
            ],
        }
    )


@pytest.fixture
def sample_analysis() -> MedicalAnalysis:
    return MedicalAnalysis(
        key_findings=["Elevated blood pressure"],
        potential_conditions=["Hypertension"],
        urgency_level=UrgencyLevel.MEDIUM,
        questions=["Do you experience headaches?", "Do you smoke?"],
    )


@pytest.fixture
def sample_report_data(sample_analysis: MedicalAnalysis) -> ReportData:
    return ReportData(
        original_report="BP 150/95. LDL 165 mg/dL.",
        analysis=sample_analysis,
        patient_responses={
            "Do you experience headaches?": "Sometimes in the morning",
            "Do you smoke?": "No",
        },
    )
