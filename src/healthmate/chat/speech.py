"""Speech output port for the chatbot.

Speech synthesis lives outside this package (browser or OS voices).  The
session only needs something that can speak text in a locale and report
progress through ``SpeechCallbacks``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, runtime_checkable

from healthmate.models import Language

_LOCALES: dict[Language, str] = {
    Language.EN: "en-US",
    Language.HI: "hi-IN",
}


def locale_for(language: Language | str) -> str:
    """BCP-47 locale used for speech input and voice selection."""
    return _LOCALES[Language(language)]


@dataclass
class SpeechCallbacks:
    """Progress notifications from a speech output."""

    on_start: Optional[Callable[[], None]] = None
    on_end: Optional[Callable[[], None]] = None
    on_error: Optional[Callable[[Exception], None]] = None


class VoiceUnavailableError(Exception):
    """No installed voice matches the requested locale."""


@runtime_checkable
class ISpeechOutput(Protocol):
    def speak(self, text: str, locale: str, callbacks: SpeechCallbacks) -> None:
        """Speak *text*; report progress and failures through *callbacks*."""
        ...

    def cancel(self) -> None:
        """Stop any utterance in progress."""
        ...
