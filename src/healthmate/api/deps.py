"""Request-scoped accessors for services stored on ``app.state``."""

from __future__ import annotations

from fastapi import Request

from healthmate.services import AIService, ChatService


def get_ai_service(request: Request) -> AIService:
    return request.app.state.ai_service


def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service
