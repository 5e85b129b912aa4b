"""Chatbot widget session and speech port."""

from __future__ import annotations

from healthmate.chat.session import GREETING, ChatSession
from healthmate.chat.speech import ISpeechOutput, SpeechCallbacks, VoiceUnavailableError, locale_for

__all__ = [
    "GREETING",
    "ChatSession",
    "ISpeechOutput",
    "SpeechCallbacks",
    "VoiceUnavailableError",
    "locale_for",
]
