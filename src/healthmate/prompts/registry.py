"""Prompt registry: single lookup point for prompt templates.

Usage::

    prompt = get_prompt("analysis", "ANALYZE_REPORT_PROMPT")

    # Alternative storage (e.g. in tests):
    configure(backend=MyBackend())
"""

from __future__ import annotations

import logging

from healthmate.prompts.backends.file_backend import FilePromptBackend
from healthmate.prompts.backends.protocol import IPromptBackend

logger = logging.getLogger(__name__)

_backend: IPromptBackend | None = None


def configure(*, backend: IPromptBackend | None = None) -> None:
    """Install the prompt backend.  Defaults to the file backend."""
    global _backend
    _backend = backend if backend is not None else FilePromptBackend()


def get_prompt(category: str, name: str) -> str:
    """Look up a prompt template by category and constant name.

    Raises:
        KeyError: If the prompt is not found.
    """
    if _backend is None:
        configure()
    assert _backend is not None
    logger.debug("Resolving prompt %s/%s", category, name)
    return _backend.get(category, name)


def reset() -> None:
    """Reset the registry to unconfigured state (for testing)."""
    global _backend
    _backend = None
