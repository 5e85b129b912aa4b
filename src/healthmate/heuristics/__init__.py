"""Regex heuristics for the doctor tools and the chatbot language guess."""

from __future__ import annotations

from healthmate.heuristics.language import detect_language
from healthmate.heuristics.scorer import SUGGESTIONS, score_note
from healthmate.heuristics.summarizer import summarize_note

__all__ = [
    "SUGGESTIONS",
    "detect_language",
    "score_note",
    "summarize_note",
]
