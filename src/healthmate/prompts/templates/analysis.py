"""Report analysis prompt templates.

Prompts are stored in ``_PROMPT_DATA`` and exposed via ``__getattr__``
which delegates to the prompt registry.
"""

from __future__ import annotations

_PROMPT_DATA: dict[str, str] = {
    "ANALYZE_REPORT_PROMPT": """You are a medical AI assistant analyzing a patient's medical report.
Extract key information and generate intelligent questions.

Report text: {report_text}

Analyze the report and return a JSON object with:
- keyFindings: Array of key medical findings from the report
- potentialConditions: Array of possible conditions based on the findings
- urgencyLevel: "low", "medium", or "high" based on the severity
- questions: Array of 3-5 relevant questions to ask the patient to better understand their condition

Make questions specific to the medical issues mentioned in the report.
Questions should help gather additional context about symptoms, duration, triggers, etc.

Directly return the final JSON structure. Do not output anything else.""",
}

# ── PEP 562 module __getattr__ ──────────────────────────────────────

_PROMPT_NAMES = frozenset(_PROMPT_DATA.keys())


def __getattr__(name: str) -> str:
    if name in _PROMPT_NAMES:
        from healthmate.prompts.registry import get_prompt

        return get_prompt("analysis", name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return list(_PROMPT_NAMES) + ["_PROMPT_DATA"]
