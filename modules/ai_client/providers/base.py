from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, List

from ..parsing import parse_test_steps
from ..prompts import build_page_analysis_messages, build_test_steps_messages
from ..types import AIProvider, ChatMessage, ProviderCapabilities


class BaseProvider(ABC):
    """
    One LLM backend reachable over HTTP.

    `chat` is the only required network operation; step generation and page
    analysis are built on top of it. Test code generation, availability
    probing and model listing are optional and advertised through
    `capabilities`; callers should check the flags instead of catching
    NotImplementedError.
    """

    provider: AIProvider
    capabilities: ProviderCapabilities = ProviderCapabilities()

    @abstractmethod
    async def chat(self, messages: Iterable[ChatMessage]) -> str:  # pragma: no cover - interface only
        raise NotImplementedError

    @abstractmethod
    async def aclose(self) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    async def generate_test_steps(self, page_content: str, test_objective: str) -> List[Any]:
        reply = await self.chat(build_test_steps_messages(page_content, test_objective))
        return parse_test_steps(reply)

    async def analyze_page_structure(self, page_content: str) -> str:
        return await self.chat(build_page_analysis_messages(page_content))

    async def generate_test_code(self, page_content: str, test_objective: str, page_name: str) -> str:
        raise NotImplementedError(f"{self.provider.value} does not generate test code")

    async def is_available(self) -> bool:
        raise NotImplementedError(f"{self.provider.value} has no availability probe")

    async def list_models(self) -> List[str]:
        raise NotImplementedError(f"{self.provider.value} does not list models")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
