"""Regex patterns for clinical-note heuristics.

Signals are plain case-insensitive substring searches, so short vital-sign
abbreviations (``bp``, ``hr``, ``rr``) also match inside longer words.
"""

from __future__ import annotations

import re
from typing import Pattern

ASSESSMENT_PATTERN: Pattern[str] = re.compile(r"assessment|diagnosis|impression", re.IGNORECASE)

PLAN_PATTERN: Pattern[str] = re.compile(r"plan|management|follow[- ]?up", re.IGNORECASE)

VITALS_PATTERN: Pattern[str] = re.compile(
    r"bp|blood pressure|hr|heart rate|rr|respiratory rate|temp|temperature|spo2",
    re.IGNORECASE,
)

WHITESPACE_RUN: Pattern[str] = re.compile(r"\s+")

# Split point after sentence-final punctuation followed by whitespace
SENTENCE_BOUNDARY: Pattern[str] = re.compile(r"(?<=[.!?])\s+")

NUMBER_PATTERN: Pattern[str] = re.compile(r"\d+(?:\.\d+)?")

DEVANAGARI_PATTERN: Pattern[str] = re.compile(r"[ऀ-ॿ]")
