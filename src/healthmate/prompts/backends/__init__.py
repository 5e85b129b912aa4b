from __future__ import annotations

from healthmate.prompts.backends.file_backend import FilePromptBackend
from healthmate.prompts.backends.protocol import IPromptBackend

__all__ = ["FilePromptBackend", "IPromptBackend"]
