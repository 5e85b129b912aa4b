"""Personal and professional report prompt templates."""

from __future__ import annotations

_PROMPT_DATA: dict[str, str] = {
    "PERSONAL_REPORT_PROMPT": """Generate a personal medical report for a patient in simple, \
easy-to-understand language.

Original Report: {original_report}
Analysis: {analysis_json}
Patient Responses: {responses_json}

Create a comprehensive report that includes:
1. What the problem is (in simple terms)
2. What might be causing it
3. Recommended treatments (in simple language)
4. Practical advice for getting better faster
5. When to seek immediate medical attention

Use everyday language that anyone can understand. Avoid medical jargon.
Be supportive and encouraging in tone.

Return a JSON object with:
- content: The full report text
- recommendations: Array of practical health advice

Directly return the final JSON structure. Do not output anything else.""",
    "PROFESSIONAL_REPORT_PROMPT": """Generate a professional medical report using proper \
medical terminology for healthcare providers.

Original Report: {original_report}
Analysis: {analysis_json}
Patient Responses: {responses_json}

Create a comprehensive professional report that includes:
1. Clinical assessment and findings
2. Differential diagnosis considerations
3. Recommended diagnostic procedures (if applicable)
4. Treatment protocol suggestions
5. Prognosis and follow-up recommendations

Use appropriate medical terminology and maintain professional clinical language.
Include relevant clinical indicators and evidence-based recommendations.

Return a JSON object with:
- content: The full professional report text
- recommendations: Array of clinical recommendations

Directly return the final JSON structure. Do not output anything else.""",
}

_PROMPT_NAMES = frozenset(_PROMPT_DATA.keys())


def __getattr__(name: str) -> str:
    if name in _PROMPT_NAMES:
        from healthmate.prompts.registry import get_prompt

        return get_prompt("report", name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return list(_PROMPT_NAMES) + ["_PROMPT_DATA"]
