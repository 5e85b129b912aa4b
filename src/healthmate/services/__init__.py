"""Services orchestrating prompts and LLM calls."""

from __future__ import annotations

from healthmate.services.ai_service import AIService, with_disclaimer
from healthmate.services.chat_service import ChatService

__all__ = ["AIService", "ChatService", "with_disclaimer"]
