from __future__ import annotations


class AIClientError(Exception):
    """Base class for errors raised by the AI client."""


class ProviderError(AIClientError):
    """A chat round trip to an LLM backend failed."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
