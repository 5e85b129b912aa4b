"""Markdown output formatter for copying or downloading a generated report."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from healthmate.models import GeneratedReport, ReportKind

_TITLES: dict[ReportKind, str] = {
    ReportKind.PERSONAL: "Personal Health Report",
    ReportKind.PROFESSIONAL: "Professional Medical Report",
}


class MarkdownFormatter:
    """Renders a GeneratedReport as a Markdown document.

    Keyword args:
        kind: ``ReportKind`` used to pick the document title.
        generated_at: ISO timestamp for the footer; defaults to now (UTC).
    """

    def format(self, report: GeneratedReport, **kwargs: Any) -> bytes:
        kind = kwargs.get("kind")
        title = _TITLES.get(ReportKind(kind), "Medical Report") if kind else "Medical Report"
        generated_at = kwargs.get("generated_at") or datetime.now(timezone.utc).isoformat()

        lines = [f"# {title}", "", report.content.strip(), ""]
        if report.recommendations:
            lines.extend(["## Recommendations", ""])
            lines.extend(f"- {item}" for item in report.recommendations)
            lines.append("")
        lines.append(f"_Generated {generated_at}_")
        return ("\n".join(lines) + "\n").encode("utf-8")

    def format_to_file(self, report: GeneratedReport, path: Path, **kwargs: Any) -> Path:
        path.write_bytes(self.format(report, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "text/markdown; charset=utf-8"

    @property
    def extension(self) -> str:
        return "md"
