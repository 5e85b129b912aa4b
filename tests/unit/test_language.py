"""Tests for the chatbot language guess."""

from __future__ import annotations

import pytest

from healthmate.heuristics.language import detect_language
from healthmate.models import Language


class TestDetectLanguage:
    def test_devanagari_is_hindi(self):
        assert detect_language("मुझे बुखार है") == Language.HI

    @pytest.mark.parametrize(
        "text",
        ["mujhe bukhar hai", "Sir dard ke liye kya dawa leni chahiye?", "NEEND nahi aati"],
    )
    def test_romanized_hindi_keywords(self, text: str):
        assert detect_language(text) == Language.HI

    @pytest.mark.parametrize(
        "text",
        ["What is a normal blood pressure?", "How much water should I drink daily", ""],
    )
    def test_english(self, text: str):
        assert detect_language(text) == Language.EN

    def test_keyword_must_be_whole_word(self):
        # "rog" appears inside "progress" but is not a word of its own
        assert detect_language("Tracking my progress") == Language.EN
