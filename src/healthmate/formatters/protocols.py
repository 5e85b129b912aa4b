"""Output formatter protocol: the contract all formatters implement."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from healthmate.models import GeneratedReport


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for generated-report download formats."""

    def format(self, report: GeneratedReport, **kwargs: Any) -> bytes:
        """Render the report into output bytes."""
        ...

    def format_to_file(self, report: GeneratedReport, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format."""
        ...

    @property
    def extension(self) -> str:
        """File extension, without the dot."""
        ...
