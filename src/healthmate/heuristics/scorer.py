"""Heuristic clinical-note quality scorer.

Fixed linear formula over note length and three completeness signals::

    score = min(60, len // 20) + 15*assessment + 15*plan + 10*vitals

clamped to ``[0, 100]``.  No LLM calls, no learned parameters.
"""

from __future__ import annotations

import logging

from healthmate.exceptions import EmptyInputError
from healthmate.heuristics.patterns import ASSESSMENT_PATTERN, PLAN_PATTERN, VITALS_PATTERN
from healthmate.models import QualityAssessment

log = logging.getLogger(__name__)

MAX_LENGTH_SCORE = 60
CHARS_PER_LENGTH_POINT = 20
ASSESSMENT_WEIGHT = 15
PLAN_WEIGHT = 15
VITALS_WEIGHT = 10

ISSUE_MISSING_ASSESSMENT = "Missing assessment/diagnosis section."
ISSUE_MISSING_PLAN = "Missing plan/management details."
ISSUE_MISSING_VITALS = "No vitals found (BP/HR/RR/Temp/SpO2)."

# Static checklist, returned for every note regardless of content.
SUGGESTIONS: tuple[str, ...] = (
    "Add a concise Assessment/Impression summarizing the case.",
    "Include an explicit Plan with medications, investigations, and follow-up.",
    "Document key vitals and abnormal lab values with dates.",
    "Use consistent units and include patient identifiers as appropriate.",
)


def length_score(note: str) -> int:
    return min(MAX_LENGTH_SCORE, len(note) // CHARS_PER_LENGTH_POINT)


def score_note(note: str) -> QualityAssessment:
    """Score *note* for documentation completeness.

    Raises:
        EmptyInputError: If the note is empty or whitespace-only.
    """
    if not note or not note.strip():
        raise EmptyInputError("No text provided")

    has_assessment = ASSESSMENT_PATTERN.search(note) is not None
    has_plan = PLAN_PATTERN.search(note) is not None
    has_vitals = VITALS_PATTERN.search(note) is not None

    score = length_score(note)
    if has_assessment:
        score += ASSESSMENT_WEIGHT
    if has_plan:
        score += PLAN_WEIGHT
    if has_vitals:
        score += VITALS_WEIGHT
    score = max(0, min(100, score))

    issues: list[str] = []
    if not has_assessment:
        issues.append(ISSUE_MISSING_ASSESSMENT)
    if not has_plan:
        issues.append(ISSUE_MISSING_PLAN)
    if not has_vitals:
        issues.append(ISSUE_MISSING_VITALS)

    log.debug("Scored note: score=%d issues=%d chars=%d", score, len(issues), len(note))
    return QualityAssessment(score=score, issues=issues, suggestions=list(SUGGESTIONS))
