"""Report analysis endpoint: the first AI call of the patient workflow."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from healthmate.api.deps import get_ai_service
from healthmate.models import MedicalAnalysis
from healthmate.services import AIService

router = APIRouter(tags=["analysis"])


class AnalyzeRequest(BaseModel):
    text: str = ""


@router.post("/analyze-report")
async def analyze_report(
    request: AnalyzeRequest,
    ai: AIService = Depends(get_ai_service),
) -> dict[str, dict]:
    """Extract findings, conditions, urgency and follow-up questions from a note.

    Never returns an analysis without questions: malformed model output is
    replaced by the fallback set.
    """
    analysis: MedicalAnalysis = await ai.analyze_report(request.text)
    return {"analysis": analysis.model_dump(by_alias=True, mode="json")}
