"""Script/keyword language guess used before the first chatbot round trip."""

from __future__ import annotations

import re
from typing import Pattern

from healthmate.heuristics.patterns import DEVANAGARI_PATTERN
from healthmate.models import Language

# Romanized Hindi (Hinglish) health vocabulary.  Anything typed in
# Devanagari is caught by the script check before this list is consulted.
HINDI_KEYWORDS: frozenset[str] = frozenset({
    # question words and grammar
    "kya", "kaise", "kab", "kahan", "kyun", "kyu", "kyon", "mujhe", "mera", "meri",
    "hota", "hoti", "karna", "karein", "chahiye", "kitna", "kitni", "nahi", "bahut",
    # care and medicine
    "dawa", "dawai", "davai", "dava", "goli", "ilaj", "upchar", "aushadhi",
    "aspatal", "jaanch", "marij", "mareez",
    # conditions and symptoms
    "bimari", "beemari", "rog", "swasthya", "dard", "bukhar", "sirdard", "khansi",
    "sardi", "jukam", "zukam", "sankraman", "raktchap", "madhumeh", "kamzori",
    "kamjori", "chakkar", "ghabrahat", "saans", "thakan", "sujan", "soojan",
    "khujli", "jalan", "ulti", "matli", "dast", "kabz", "kabj", "chot", "ghaav",
    # body
    "aankh", "twacha", "haddi", "dimag", "khoon", "peshab",
    # mind and lifestyle
    "tanav", "chinta", "neend", "bhookh", "bhukh", "vajan", "wajan", "motapa",
    "vyayam", "aahar", "poshan",
    # advice and effects
    "salah", "sujhav", "upay", "bachav", "savdhani", "nuksan", "fayda", "gambhir",
    "turant",
    # people
    "baccha", "bachcha", "bujurg", "mahila", "purush", "garbhavastha",
})

_WORD: Pattern[str] = re.compile(r"[a-z]+")


def detect_language(text: str) -> Language:
    """Return ``hi`` for Devanagari script or Hindi health vocabulary, else ``en``."""
    if DEVANAGARI_PATTERN.search(text):
        return Language.HI
    for token in _WORD.findall(text.lower()):
        if token in HINDI_KEYWORDS:
            return Language.HI
    return Language.EN
