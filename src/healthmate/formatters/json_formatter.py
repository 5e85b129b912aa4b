"""JSON output formatter."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from healthmate.models import GeneratedReport


class JSONFormatter:
    """Renders a GeneratedReport as indented JSON bytes."""

    def format(self, report: GeneratedReport, **kwargs: Any) -> bytes:
        return json.dumps(report.model_dump(), indent=2, ensure_ascii=False).encode("utf-8")

    def format_to_file(self, report: GeneratedReport, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(report, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"

    @property
    def extension(self) -> str:
        return "json"
