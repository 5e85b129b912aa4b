"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from healthmate.core.config import AppSettings

log = logging.getLogger(__name__)

# Providers that run locally and do not require an API key
_NO_KEY_PROVIDERS = frozenset({"ollama"})


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_api_key(settings)
    _check_timeout(settings)


def _check_api_key(settings: AppSettings) -> None:
    """Reject placeholder API keys for providers that need real ones."""
    if settings.llm.provider not in _NO_KEY_PROVIDERS:
        if settings.llm.api_key in ("no-key", ""):
            raise ValueError(
                f"HEALTHMATE_LLM_API_KEY is required for provider '{settings.llm.provider}'. "
                f"Set it (or OPENAI_API_KEY / GEMINI_API_KEY) via environment variable."
            )


def _check_timeout(settings: AppSettings) -> None:
    """Warn when LLM calls could hang the request indefinitely."""
    if settings.llm.timeout <= 0:
        log.warning(
            "HEALTHMATE_LLM_TIMEOUT=%s disables the request timeout. "
            "A hung provider call will keep the client waiting.",
            settings.llm.timeout,
        )
