"""Output formatters for downloading a GeneratedReport.

Usage::

    from healthmate.formatters import get_formatter

    md = get_formatter("markdown")
    data = md.format(report, kind="personal")
"""

from __future__ import annotations

from healthmate.formatters.json_formatter import JSONFormatter
from healthmate.formatters.markdown_formatter import MarkdownFormatter
from healthmate.formatters.protocols import IOutputFormatter

__all__ = [
    "IOutputFormatter",
    "JSONFormatter",
    "MarkdownFormatter",
    "get_formatter",
]

_FORMATTERS: dict[str, type] = {
    "json": JSONFormatter,
    "markdown": MarkdownFormatter,
}


def get_formatter(name: str) -> IOutputFormatter:
    """Return a formatter instance by name.

    Raises:
        KeyError: If *name* is not a known format.
    """
    return _FORMATTERS[name]()
