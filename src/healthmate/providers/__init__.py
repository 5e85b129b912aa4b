"""LLM provider access."""

from __future__ import annotations

from healthmate.providers.client import LLMClient
from healthmate.providers.protocols import ICompletionClient

__all__ = ["ICompletionClient", "LLMClient"]
