"""HealthMate chatbot backend: language selection, prompting, fallback reply."""

from __future__ import annotations

import logging

from healthmate.exceptions import EmptyInputError
from healthmate.heuristics.language import detect_language
from healthmate.models import ChatReply, Language
from healthmate.prompts import get_prompt
from healthmate.providers.protocols import ICompletionClient

log = logging.getLogger(__name__)

DEFAULT_CONTEXT = "comprehensive_health"

FALLBACK_REPLIES: dict[Language, str] = {
    Language.EN: "Sorry, I cannot help you right now. Please try again later.",
    Language.HI: "माफ करें, मैं अभी आपकी मदद नहीं कर सकता। कृपया बाद में कोशिश करें।",
}

_SUFFIX: dict[Language, str] = {Language.EN: "EN", Language.HI: "HI"}


class ChatService:
    """Answers one health question per call; holds no conversation state."""

    def __init__(self, client: ICompletionClient) -> None:
        self._client = client

    async def answer(
        self,
        question: str,
        language: Language | str | None = None,
        context: str = DEFAULT_CONTEXT,
    ) -> ChatReply:
        """Answer *question* in *language*, guessing the language when absent.

        Raises:
            EmptyInputError: If *question* is empty.
            LLMClientError: On transport failure.
        """
        if not question or not question.strip():
            raise EmptyInputError("Question is required")

        lang = Language(language) if language else detect_language(question)
        suffix = _SUFFIX[lang]
        system_prompt = get_prompt("chat", f"SYSTEM_PROMPT_{suffix}").format(
            context=context or DEFAULT_CONTEXT
        )
        user_prompt = get_prompt("chat", f"USER_PROMPT_{suffix}").format(question=question)

        text = await self._client.complete(
            user_prompt,
            system_prompt=system_prompt,
            model=self._client.chat_model,
        )
        if not text or not text.strip():
            log.warning("Empty chatbot completion; returning fallback reply", extra={"language": lang.value})
            return ChatReply(response=FALLBACK_REPLIES[lang], detected_language=lang)

        return ChatReply(response=text, detected_language=lang)
