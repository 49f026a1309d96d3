from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from .types import AIProvider

DEFAULT_OLLAMA_URL = "http://localhost:11434"
DEFAULT_OLLAMA_MODEL = "llama3.2:latest"
DEFAULT_LM_STUDIO_URL = "http://localhost:1234"
DEFAULT_LM_STUDIO_MODEL = "llama-3.2-3b-instruct"
DEFAULT_LM_STUDIO_API_KEY = "lm-studio"
DEFAULT_PROVIDER = AIProvider.OLLAMA


@dataclass(frozen=True)
class ProviderConfig:
    """Connection details for one LLM backend."""
    url: str
    model: str
    api_key: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "url", self.url.rstrip("/"))


@dataclass(frozen=True)
class AIClientSettings:
    """
    Settings for both backends plus the preferred provider.

    Build it once with `from_env()` (or by hand in tests) and pass it to the
    factory; nothing downstream reads the environment itself.
    """
    ollama: ProviderConfig = field(
        default_factory=lambda: ProviderConfig(url=DEFAULT_OLLAMA_URL, model=DEFAULT_OLLAMA_MODEL)
    )
    lmstudio: ProviderConfig = field(
        default_factory=lambda: ProviderConfig(
            url=DEFAULT_LM_STUDIO_URL,
            model=DEFAULT_LM_STUDIO_MODEL,
            api_key=DEFAULT_LM_STUDIO_API_KEY,
        )
    )
    provider: AIProvider = DEFAULT_PROVIDER

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AIClientSettings":
        """
        Read settings from environment variables.

        Args:
            environ: Mapping to read from. When omitted, a `.env` file is loaded
                (if present) and `os.environ` is used.

        Returns:
            AIClientSettings with hard-coded defaults for anything unset
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        return cls(
            ollama=ProviderConfig(
                url=environ.get("OLLAMA_URL") or DEFAULT_OLLAMA_URL,
                model=environ.get("OLLAMA_MODEL") or DEFAULT_OLLAMA_MODEL,
            ),
            lmstudio=ProviderConfig(
                url=environ.get("LM_STUDIO_URL") or DEFAULT_LM_STUDIO_URL,
                model=environ.get("LM_STUDIO_MODEL") or DEFAULT_LM_STUDIO_MODEL,
                api_key=environ.get("LM_STUDIO_API_KEY") or DEFAULT_LM_STUDIO_API_KEY,
            ),
            provider=AIProvider.parse(environ.get("AI_PROVIDER") or DEFAULT_PROVIDER.value),
        )
