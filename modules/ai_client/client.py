from __future__ import annotations

from typing import Any, Iterable, List, Sequence

from .providers.base import BaseProvider
from .types import AIProvider, ChatMessage, ProviderCapabilities

TEST_CODE_TEMPLATE = """import {{ test, expect }} from '@playwright/test';

test.describe('{page_name} Tests', () => {{
  test('{test_objective}', async ({{ page }}) => {{
    // Navigate to the page
    await page.goto('/');

    // Generated test steps
{steps}
  }});
}});"""


def render_test_code(steps: Sequence[Any], page_name: str, test_objective: str) -> str:
    """Wrap generated steps in a minimal Playwright test suite."""
    body = "\n".join(f"    {step}" for step in steps)
    return TEST_CODE_TEMPLATE.format(page_name=page_name, test_objective=test_objective, steps=body)


class UnifiedAIClient:
    """
    Same contract for every backend.

    Calls the provider directly when it supports an operation and falls back
    to something derived from `chat` (or a safe default) when it does not.
    """

    def __init__(self, provider_client: BaseProvider, provider: AIProvider):
        self._client = provider_client
        self._provider = provider

    @property
    def capabilities(self) -> ProviderCapabilities:
        return self._client.capabilities

    async def chat(self, messages: Iterable[ChatMessage]) -> str:
        return await self._client.chat(list(messages))

    async def generate_test_steps(self, page_content: str, test_objective: str) -> List[Any]:
        return await self._client.generate_test_steps(page_content, test_objective)

    async def analyze_page_structure(self, page_content: str) -> str:
        return await self._client.analyze_page_structure(page_content)

    async def generate_test_code(self, page_content: str, test_objective: str, page_name: str) -> str:
        if self.capabilities.test_code:
            return await self._client.generate_test_code(page_content, test_objective, page_name)

        steps = await self.generate_test_steps(page_content, test_objective)
        return render_test_code(steps, page_name, test_objective)

    async def is_available(self) -> bool:
        if self.capabilities.availability_probe:
            return await self._client.is_available()
        # No probe: never treat the backend as down
        return True

    async def list_models(self) -> List[str]:
        if self.capabilities.model_listing:
            return await self._client.list_models()
        return []

    def get_provider(self) -> AIProvider:
        return self._provider

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "UnifiedAIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
