"""Nested pydantic-settings configuration for the application.

Each group reads its own ``HEALTHMATE_<GROUP>_*`` env vars::

    export HEALTHMATE_LLM_PROVIDER=openai
    export HEALTHMATE_LLM_MODEL=gpt-4o
"""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class LLMConfig(BaseSettings):
    """LLM backend configuration.

    Env vars use ``HEALTHMATE_LLM_`` prefix.  The provider's conventional key
    variables (``OPENAI_API_KEY``, ``GEMINI_API_KEY``) are accepted as well.
    The chat model has its own key so an OpenAI analysis model and a Gemini
    chat model can run side by side.
    """

    model_config = {"env_prefix": "HEALTHMATE_LLM_", "populate_by_name": True}

    provider: Literal["openai", "gemini", "anthropic", "ollama", "litellm"] = "openai"
    api_key: str = Field(
        default="no-key",
        validation_alias=AliasChoices(
            "HEALTHMATE_LLM_API_KEY",
            "OPENAI_API_KEY",
            "GEMINI_API_KEY",
        ),
    )
    base_url: str = ""
    model: str = "gpt-4o"
    chat_model: str = "gemini/gemini-1.5-flash"
    # Used for calls to chat_model; empty means fall back to api_key.
    chat_api_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "HEALTHMATE_LLM_CHAT_API_KEY",
            "GEMINI_API_KEY",
        ),
    )
    temperature: float = 0.2
    top_p: float = 1.0
    timeout: float = 60.0
    max_retries: int = 3
    retry_jitter_factor: float = 0.5
    retry_max_delay: float = 30.0


class APIConfig(BaseSettings):
    """HTTP server configuration.

    Env vars use ``HEALTHMATE_API_`` prefix.
    """

    model_config = {"env_prefix": "HEALTHMATE_API_"}

    title: str = "HealthMate"
    description: str = "Medical report analysis, note verification and health chatbot"
    host: str = "0.0.0.0"
    port: int = 8080


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``HEALTHMATE_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "HEALTHMATE_OBSERVABILITY_"}

    service_name: str = "healthmate"
    log_level: str = "INFO"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    llm: LLMConfig = LLMConfig()
    api: APIConfig = APIConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
