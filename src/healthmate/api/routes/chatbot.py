"""Chatbot endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from healthmate.api.deps import get_chat_service
from healthmate.models import Language
from healthmate.services import ChatService
from healthmate.services.chat_service import DEFAULT_CONTEXT

router = APIRouter(tags=["chatbot"])


class ChatRequest(BaseModel):
    question: str = ""
    language: Optional[Language] = None
    context: str = DEFAULT_CONTEXT


@router.post("/chatbot")
async def chatbot(
    request: ChatRequest,
    chat: ChatService = Depends(get_chat_service),
) -> dict[str, str]:
    """Answer one health question; the language is guessed when not given."""
    reply = await chat.answer(request.question, request.language, request.context)
    return reply.model_dump(by_alias=True, mode="json")
