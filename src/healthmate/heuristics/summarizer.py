"""Extractive note summarizer: first sentences plus a few insights."""

from __future__ import annotations

from healthmate.exceptions import EmptyInputError
from healthmate.heuristics.patterns import NUMBER_PATTERN, SENTENCE_BOUNDARY, WHITESPACE_RUN
from healthmate.models import Insight, SummaryMode, SummaryResult

GIST_SENTENCES = 3
MAX_KEY_VALUES = 5
LONG_REPORT_CHARS = 400

_HEADERS: dict[SummaryMode, str] = {
    SummaryMode.PATIENT: "Summary",
    SummaryMode.CLINICIAN: "Technical Overview",
}

_CLOSINGS: dict[SummaryMode, str] = {
    SummaryMode.PATIENT: (
        "What it means: This simplifies your report into the most important points. "
        "Please consult with your healthcare provider for medical decisions."
    ),
    SummaryMode.CLINICIAN: (
        "Clinical note: This is an automated extractive overview; verify findings against "
        "the source record before clinical decisions and consult the treating clinician "
        "where appropriate."
    ),
}


def split_sentences(text: str) -> list[str]:
    """Collapse whitespace and split after ``.``, ``!`` or ``?``."""
    normalized = WHITESPACE_RUN.sub(" ", text).strip()
    return [s for s in SENTENCE_BOUNDARY.split(normalized) if s]


def extract_key_values(text: str, limit: int = MAX_KEY_VALUES) -> list[str]:
    """Numeric substrings in order of appearance, at most *limit*."""
    return [m.group(0) for m in NUMBER_PATTERN.finditer(text)][:limit]


def build_insights(raw: str, sentences: list[str], numbers: list[str]) -> list[Insight]:
    return [
        Insight(label="Key Values Found", value=", ".join(numbers) if numbers else "n/a"),
        Insight(
            label="Report Length",
            value=f"{len(raw)} chars",
            trend="long" if len(raw) > LONG_REPORT_CHARS else "short",
        ),
        Insight(label="Sentence Count", value=str(len(sentences))),
    ]


def summarize_note(note: str, mode: SummaryMode = SummaryMode.PATIENT) -> SummaryResult:
    """Build a patient-friendly or clinician-technical extractive summary.

    A note with no sentences still yields the header and closing text
    around an empty gist.

    Raises:
        EmptyInputError: If the note is empty or whitespace-only.
    """
    if not note or not note.strip():
        raise EmptyInputError("No text provided")

    mode = SummaryMode(mode)
    sentences = split_sentences(note)
    gist = " ".join(sentences[:GIST_SENTENCES])
    numbers = extract_key_values(note)

    summary = f"{_HEADERS[mode]}: {gist}\n\n{_CLOSINGS[mode]}"
    return SummaryResult(summary=summary, insights=build_insights(note, sentences, numbers))
