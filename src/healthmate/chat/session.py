"""Chatbot session: append-only transcript, language flag, optional speech."""

from __future__ import annotations

import logging
from typing import Optional

from healthmate.chat.speech import ISpeechOutput, SpeechCallbacks, locale_for
from healthmate.exceptions import EmptyInputError, OperationInProgressError, SessionClosedError
from healthmate.heuristics.language import detect_language
from healthmate.models import ChatMessage, ChatRole, Language
from healthmate.services.chat_service import DEFAULT_CONTEXT
from healthmate.workflow.protocols import ChatResponder

log = logging.getLogger(__name__)

GREETING = (
    "Hi! I'm HealthMate. Ask me about your medicines. "
    "I can explain usage, side effects, and precautions."
)


class ChatSession:
    """One floating-widget conversation.

    Sends are strictly sequential: a second ``send`` while a reply is pending
    raises ``OperationInProgressError``.  After ``close()`` any late reply is
    dropped without touching the transcript or the speech output.
    """

    def __init__(
        self,
        responder: ChatResponder,
        *,
        language: Language | str = Language.EN,
        auto_detect: bool = False,
        speech: Optional[ISpeechOutput] = None,
        speech_callbacks: Optional[SpeechCallbacks] = None,
        greeting: Optional[str] = GREETING,
        context: str = DEFAULT_CONTEXT,
    ) -> None:
        self._responder = responder
        self._language = Language(language)
        self._auto_detect = auto_detect
        self._speech = speech
        self._speech_callbacks = speech_callbacks or SpeechCallbacks()
        self._context = context
        self._messages: list[ChatMessage] = []
        if greeting:
            self._messages.append(ChatMessage(role=ChatRole.ASSISTANT, content=greeting))
        self._pending = False
        self._closed = False
        self._round_trips = 0
        self.speaking = False
        self.last_speech_error: Optional[Exception] = None

    @property
    def transcript(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def language(self) -> Language:
        return self._language

    @property
    def input_locale(self) -> str:
        """Locale for speech recognition of the next question."""
        return locale_for(self._language)

    @property
    def is_pending(self) -> bool:
        return self._pending

    @property
    def closed(self) -> bool:
        return self._closed

    def set_language(self, language: Language | str) -> None:
        self._language = Language(language)

    def toggle_language(self) -> Language:
        self._language = Language.HI if self._language == Language.EN else Language.EN
        return self._language

    async def send(self, question: str) -> Optional[ChatMessage]:
        """Append the question, await the reply, append and speak it.

        Returns the assistant message, or ``None`` if the session was closed
        while the reply was pending.
        """
        if self._closed:
            raise SessionClosedError("Chat session is closed")
        text = question.strip() if question else ""
        if not text:
            raise EmptyInputError("Question is required")
        if self._pending:
            raise OperationInProgressError("A reply is already pending")

        if self._auto_detect and self._round_trips == 0:
            self._language = detect_language(text)

        self._messages.append(ChatMessage(role=ChatRole.USER, content=text))
        self._pending = True
        try:
            reply = await self._responder.answer(text, self._language, self._context)
        finally:
            self._pending = False
            self._round_trips += 1

        if self._closed:
            log.debug("Dropping chatbot reply for a closed session")
            return None

        self._language = reply.detected_language
        message = ChatMessage(role=ChatRole.ASSISTANT, content=reply.response)
        self._messages.append(message)
        self._speak(message.content)
        return message

    def _speak(self, text: str) -> None:
        if self._speech is None:
            return

        user = self._speech_callbacks

        def _on_start() -> None:
            self.speaking = True
            if user.on_start:
                user.on_start()

        def _on_end() -> None:
            self.speaking = False
            if user.on_end:
                user.on_end()

        def _on_error(exc: Exception) -> None:
            self.speaking = False
            self.last_speech_error = exc
            log.warning("Speech output failed; showing text only: %s", exc)
            if user.on_error:
                user.on_error(exc)

        callbacks = SpeechCallbacks(on_start=_on_start, on_end=_on_end, on_error=_on_error)
        try:
            self._speech.cancel()
            self._speech.speak(text, locale_for(self._language), callbacks)
        except Exception as exc:
            _on_error(exc)

    def close(self) -> None:
        """Tear down the session; pending replies are ignored when they land."""
        self._closed = True
        if self._speech is not None and self.speaking:
            try:
                self._speech.cancel()
            except Exception as exc:
                log.warning("Speech cancel failed on close: %s", exc)
            self.speaking = False
