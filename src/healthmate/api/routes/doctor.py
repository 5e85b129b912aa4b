"""Doctor tools: heuristic summary and note-quality verification.

Both endpoints are pure text heuristics and never call the AI provider.
"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from healthmate.heuristics import score_note, summarize_note
from healthmate.models import QualityAssessment, SummaryMode, SummaryResult

router = APIRouter(tags=["doctor"])


class SummaryRequest(BaseModel):
    text: str = ""
    mode: SummaryMode = SummaryMode.PATIENT


class VerifyRequest(BaseModel):
    text: str = ""


@router.post("/summary", response_model=SummaryResult)
async def summary(request: SummaryRequest) -> SummaryResult:
    """Extractive summary with a few numeric and length insights."""
    return summarize_note(request.text, request.mode)


@router.post("/verify", response_model=QualityAssessment)
async def verify(request: VerifyRequest) -> QualityAssessment:
    """Score a clinical note 0-100 for length and section coverage."""
    return score_note(request.text)
