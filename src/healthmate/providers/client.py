"""LiteLLM-backed completion client shared by the AI and chat services.

One instance is built at process start from ``LLMConfig`` and injected into
the services that need it.  Model ids carry LiteLLM provider prefixes
(``gemini/...``, ``anthropic/...``); bare ids go to OpenAI.
"""

from __future__ import annotations

import asyncio
import json
import logging
import random
import re
from typing import Any

from healthmate.core.config import LLMConfig
from healthmate.exceptions import NonRetryableError, RetryableError

log = logging.getLogger(__name__)

_FENCE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)
_TRAILING_COMMA = re.compile(r",\s*([}\]])")
_DECODER = json.JSONDecoder()


def _loads_lenient(text: str) -> Any | None:
    """``json.loads`` that tolerates trailing commas; ``None`` when nothing parses."""
    text = text.strip()
    if not text:
        return None
    for candidate in (text, _TRAILING_COMMA.sub(r"\1", text)):
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue
    return None


class LLMClient:
    """Async completions with exponential backoff and a per-call timeout."""

    def __init__(self, config: LLMConfig) -> None:
        self._config = config

    @property
    def model(self) -> str:
        return self._config.model

    @property
    def chat_model(self) -> str:
        return self._config.chat_model or self._config.model

    @staticmethod
    def _is_retryable(exc: Exception) -> bool:
        """Client errors (bad key, bad request, unknown model) are final; the rest are retried."""
        from litellm.exceptions import AuthenticationError, BadRequestError, NotFoundError

        return not isinstance(exc, (AuthenticationError, BadRequestError, NotFoundError))

    def _backoff_delay(self, attempt: int) -> float:
        base = min(2 ** (attempt - 1), self._config.retry_max_delay)
        return base + random.uniform(0, base * self._config.retry_jitter_factor)

    def _request_kwargs(
        self,
        messages: list[dict[str, Any]],
        model: str | None,
        json_mode: bool,
        temperature: float | None,
    ) -> dict[str, Any]:
        cfg = self._config
        resolved = model or cfg.model
        api_key = cfg.chat_api_key if resolved == self.chat_model and cfg.chat_api_key else cfg.api_key
        kwargs: dict[str, Any] = {
            "model": resolved,
            "messages": messages,
            "temperature": cfg.temperature if temperature is None else temperature,
            "top_p": cfg.top_p,
        }
        if cfg.timeout > 0:
            kwargs["timeout"] = cfg.timeout
        if api_key not in ("", "no-key"):
            kwargs["api_key"] = api_key
        if cfg.base_url:
            kwargs["api_base"] = cfg.base_url
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        return kwargs

    async def complete(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        model: str | None = None,
        json_mode: bool = False,
        temperature: float | None = None,
    ) -> str:
        """Send one user turn (plus optional system turn) and return the reply text.

        Args:
            prompt: User message content.
            system_prompt: Optional system message.
            model: Model id override, e.g. the chat model.
            json_mode: Ask the provider for a JSON object response.
            temperature: Override the configured temperature.

        Raises:
            NonRetryableError: Auth or bad-request failure, raised immediately.
            RetryableError: Transient failure that outlasted every attempt.
        """
        from litellm import acompletion

        messages: list[dict[str, Any]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        kwargs = self._request_kwargs(messages, model, json_mode, temperature)

        attempts = max(1, self._config.max_retries)
        for attempt in range(1, attempts + 1):
            try:
                response = await acompletion(**kwargs)
            except Exception as exc:
                if not self._is_retryable(exc):
                    raise NonRetryableError(f"Non-retryable LLM error: {exc}") from exc
                if attempt == attempts:
                    raise RetryableError(f"LLM API failed after {attempts} retries: {exc}") from exc
                delay = self._backoff_delay(attempt)
                log.warning(
                    "LLM call to %s failed (attempt %d/%d), retrying in %.1fs: %s",
                    kwargs["model"], attempt, attempts, delay, exc,
                )
                await asyncio.sleep(delay)
                continue
            return response.choices[0].message.content or ""

        raise RetryableError("LLM API was not called")  # unreachable: attempts >= 1

    @staticmethod
    def extract_json(content: str) -> Any:
        """Pull a JSON value out of a model reply.

        Tries fenced blocks first, then the whole reply, then the first
        ``{...}`` object embedded in prose.  Returns ``{}`` when nothing parses.
        """
        if not content:
            return {}

        for candidate in [m.group(1) for m in _FENCE.finditer(content)] + [content]:
            parsed = _loads_lenient(candidate)
            if parsed is not None:
                return parsed

        start = content.find("{")
        while start != -1:
            try:
                parsed, _ = _DECODER.raw_decode(content, start)
                return parsed
            except json.JSONDecodeError:
                start = content.find("{", start + 1)

        log.warning(
            "No JSON found in LLM response",
            extra={"response_length": len(content), "response_preview": content[:200]},
        )
        return {}
