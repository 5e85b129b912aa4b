"""Application configuration, logging and startup checks."""

from __future__ import annotations

from healthmate.core.config import APIConfig, AppSettings, LLMConfig, ObservabilityConfig
from healthmate.core.logging_config import setup_logging
from healthmate.core.startup_checks import validate_settings

__all__ = [
    "APIConfig",
    "AppSettings",
    "LLMConfig",
    "ObservabilityConfig",
    "setup_logging",
    "validate_settings",
]
