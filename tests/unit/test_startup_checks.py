"""Tests for startup validation checks and settings loading."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from healthmate.core.config import AppSettings, LLMConfig
from healthmate.core.startup_checks import validate_settings


class TestApiKeyValidation:
    """Validate that placeholder API keys are rejected for providers that need them."""

    @pytest.mark.parametrize("provider", ["openai", "gemini", "anthropic", "litellm"])
    def test_rejects_no_key(self, provider: str):
        settings = AppSettings(llm=LLMConfig(provider=provider, api_key="no-key"))
        with pytest.raises(ValueError, match="HEALTHMATE_LLM_API_KEY is required"):
            validate_settings(settings)

    def test_rejects_empty_key(self):
        settings = AppSettings(llm=LLMConfig(provider="openai", api_key=""))
        with pytest.raises(ValueError, match="HEALTHMATE_LLM_API_KEY is required"):
            validate_settings(settings)

    def test_accepts_no_key_for_ollama(self):
        """Ollama is local, no API key needed."""
        settings = AppSettings(llm=LLMConfig(provider="ollama", api_key="no-key"))
        validate_settings(settings)  # Should not raise

    def test_accepts_real_key(self):
        settings = AppSettings(llm=LLMConfig(provider="gemini", api_key="real-key-here"))
        validate_settings(settings)  # Should not raise


class TestTimeoutCheck:
    def test_warns_when_timeout_disabled(self):
        settings = AppSettings(llm=LLMConfig(api_key="k", timeout=0))
        with patch("healthmate.core.startup_checks.log") as mock_log:
            validate_settings(settings)
            mock_log.warning.assert_called()

    def test_silent_with_timeout(self):
        settings = AppSettings(llm=LLMConfig(api_key="k", timeout=30))
        with patch("healthmate.core.startup_checks.log") as mock_log:
            validate_settings(settings)
            mock_log.warning.assert_not_called()


class TestEnvironment:
    def test_prefixed_env_vars(self):
        env = {
            "HEALTHMATE_LLM_MODEL": "gemini/gemini-1.5-pro",
            "HEALTHMATE_LLM_MAX_RETRIES": "5",
            "HEALTHMATE_API_PORT": "9000",
            "HEALTHMATE_OBSERVABILITY_LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env):
            llm = LLMConfig()
            settings = AppSettings(llm=llm)
            from healthmate.core.config import APIConfig, ObservabilityConfig

            assert llm.model == "gemini/gemini-1.5-pro"
            assert llm.max_retries == 5
            assert APIConfig().port == 9000
            assert ObservabilityConfig().log_level == "DEBUG"
            assert settings.llm.max_retries == 5

    def test_provider_key_fallback(self):
        with patch.dict(os.environ, {"GEMINI_API_KEY": "gem-key"}, clear=False):
            os.environ.pop("HEALTHMATE_LLM_API_KEY", None)
            os.environ.pop("OPENAI_API_KEY", None)
            assert LLMConfig().api_key == "gem-key"

    def test_chat_key_is_separate_from_analysis_key(self):
        env = {"OPENAI_API_KEY": "sk-openai", "GEMINI_API_KEY": "gem-key"}
        with patch.dict(os.environ, env, clear=True):
            llm = LLMConfig()
            assert llm.api_key == "sk-openai"
            assert llm.chat_api_key == "gem-key"

    def test_prefixed_key_wins(self):
        env = {"HEALTHMATE_LLM_API_KEY": "primary", "OPENAI_API_KEY": "secondary"}
        with patch.dict(os.environ, env):
            assert LLMConfig().api_key == "primary"
