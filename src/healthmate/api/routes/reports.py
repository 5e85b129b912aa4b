"""Report generation and export endpoints."""

from __future__ import annotations

from io import BytesIO
from typing import Literal, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, ConfigDict, Field

from healthmate.api.deps import get_ai_service
from healthmate.formatters import get_formatter
from healthmate.models import GeneratedReport, ReportData, ReportKind
from healthmate.services import AIService, with_disclaimer

router = APIRouter(tags=["reports"])


class GenerateReportRequest(BaseModel):
    """``reportType`` is validated by the service so a bad value yields its message."""

    model_config = ConfigDict(populate_by_name=True)

    report_data: ReportData = Field(alias="reportData")
    report_type: str = Field(alias="reportType")


@router.post("/generate-report")
async def generate_report(
    request: GenerateReportRequest,
    ai: AIService = Depends(get_ai_service),
) -> dict[str, dict]:
    """Generate a personal or professional report with the AI disclaimer appended."""
    report = await ai.generate_report(request.report_type, request.report_data)
    return {"report": with_disclaimer(report).model_dump(mode="json")}


class ExportRequest(BaseModel):
    """Request to download a generated report in a given format."""

    model_config = ConfigDict(populate_by_name=True)

    report: GeneratedReport
    output_format: Literal["markdown", "json"] = Field(default="markdown", alias="format")
    report_type: Optional[ReportKind] = Field(default=None, alias="reportType")


@router.post("/report/export")
async def export_report(request: ExportRequest) -> StreamingResponse:
    """Export a generated report as Markdown or JSON."""
    formatter = get_formatter(request.output_format)
    output_bytes = formatter.format(request.report, kind=request.report_type)
    stem = f"{request.report_type.value}_report" if request.report_type else "report"

    return StreamingResponse(
        BytesIO(output_bytes),
        media_type=formatter.content_type,
        headers={"Content-Disposition": f'attachment; filename="{stem}.{formatter.extension}"'},
    )
