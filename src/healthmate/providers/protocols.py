"""Completion client protocol: the seam services depend on."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ICompletionClient(Protocol):
    """What the AI and chat services need from an LLM client.

    ``LLMClient`` is the production implementation; tests substitute a
    canned-response fake.
    """

    @property
    def model(self) -> str: ...

    @property
    def chat_model(self) -> str: ...

    async def complete(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        model: str | None = None,
        json_mode: bool = False,
        temperature: float | None = None,
    ) -> str:
        """Run one completion and return the text content."""
        ...

    def extract_json(self, content: str) -> Any:
        """Best-effort JSON parse; ``{}`` when nothing parses."""
        ...
