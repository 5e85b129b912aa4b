"""File-based prompt backend.

Each template module stores its prompts in a ``_PROMPT_DATA`` dict. This backend
reads from that dict directly, bypassing module ``__getattr__`` and avoiding
infinite recursion (since ``__getattr__`` delegates to ``get_prompt()`` which
calls back into this backend).
"""

from __future__ import annotations

import importlib
from typing import Any


class FilePromptBackend:
    """Loads prompts from Python modules on disk via importlib.

    Module path convention: ``healthmate.prompts.templates.{category}``
    """

    def __init__(self, package: str = "healthmate.prompts.templates") -> None:
        self._package = package
        self._modules: dict[str, Any] = {}

    def get(self, category: str, name: str) -> str:
        if category not in self._modules:
            module_path = f"{self._package}.{category}"
            try:
                self._modules[category] = importlib.import_module(module_path)
            except ModuleNotFoundError as exc:
                raise KeyError(f"Prompt module not found: {module_path}") from exc

        data: dict[str, str] | None = getattr(self._modules[category], "_PROMPT_DATA", None)
        if data is not None and name in data:
            return data[name]

        raise KeyError(f"Prompt {name!r} not found in {category}")
