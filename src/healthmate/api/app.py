"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI

from healthmate.api.middleware.error_handler import register_error_handlers
from healthmate.api.routes import analysis, chatbot, doctor, health, reports
from healthmate.core.config import APIConfig, AppSettings
from healthmate.core.logging_config import setup_logging
from healthmate.core.startup_checks import validate_settings
from healthmate.providers import LLMClient
from healthmate.services import AIService, ChatService


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("healthmate")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


def create_app(
    settings: Optional[AppSettings] = None,
    *,
    ai_service: Optional[AIService] = None,
    chat_service: Optional[ChatService] = None,
) -> FastAPI:
    """Build the HealthMate API.

    Services passed in are used as-is; otherwise a shared ``LLMClient`` is
    built from settings at startup, after ``validate_settings`` passes.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        resolved = settings or AppSettings()
        setup_logging(resolved.observability)

        if app.state.ai_service is None or app.state.chat_service is None:
            validate_settings(resolved)
            client = LLMClient(resolved.llm)
            if app.state.ai_service is None:
                app.state.ai_service = AIService(client)
            if app.state.chat_service is None:
                app.state.chat_service = ChatService(client)

        app.state.settings = resolved
        yield

    api_config = settings.api if settings else APIConfig()
    app = FastAPI(
        title=api_config.title,
        description=api_config.description,
        version=_get_version(),
        lifespan=lifespan,
    )
    app.state.ai_service = ai_service
    app.state.chat_service = chat_service

    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(analysis.router, prefix="/api")
    app.include_router(reports.router, prefix="/api")
    app.include_router(doctor.router, prefix="/api")
    app.include_router(chatbot.router, prefix="/api")
    return app


app = create_app()
