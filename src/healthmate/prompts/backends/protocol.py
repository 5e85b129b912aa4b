"""Prompt backend protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IPromptBackend(Protocol):
    """Source of prompt templates, keyed by category and constant name.

    Lookups are synchronous because template modules resolve attributes
    through ``__getattr__``.
    """

    def get(self, category: str, name: str) -> str:
        """Return the template for ``category``/``name`` (e.g. ``"chat"``/``"SYSTEM_PROMPT_EN"``).

        Raises:
            KeyError: If the prompt is not found.
        """
        ...
