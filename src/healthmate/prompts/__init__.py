"""Prompt management: registry and templates."""

from __future__ import annotations

from healthmate.prompts.registry import configure, get_prompt, reset

__all__ = ["configure", "get_prompt", "reset"]
