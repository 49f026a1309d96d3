from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

from ..config import DEFAULT_OLLAMA_MODEL, DEFAULT_OLLAMA_URL, ProviderConfig
from ..errors import ProviderError
from ..prompts import build_test_code_messages
from ..types import AIProvider, ChatMessage, ProviderCapabilities
from .base import BaseProvider

logger = logging.getLogger(__name__)


class OllamaProvider(BaseProvider):
    """
    Provider for Ollama servers (default: http://localhost:11434).

    Uses the native `/api/chat` endpoint in non-streaming mode and `/api/tags`
    for the availability probe and model listing.
    """

    provider = AIProvider.OLLAMA
    capabilities = ProviderCapabilities(test_code=True, availability_probe=True, model_listing=True)

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        timeout_seconds: float = 120.0,
        probe_timeout_seconds: float = 5.0,
        extra_headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self._config = config or ProviderConfig(url=DEFAULT_OLLAMA_URL, model=DEFAULT_OLLAMA_MODEL)
        self._timeout_seconds = timeout_seconds
        self._probe_timeout_seconds = probe_timeout_seconds
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if extra_headers:
            headers.update(extra_headers)
        self._async = httpx.AsyncClient(base_url=self._config.url, timeout=self._timeout_seconds, headers=headers)

    @property
    def config(self) -> ProviderConfig:
        return self._config

    async def chat(self, messages: Iterable[ChatMessage]) -> str:
        data: Dict[str, Any] = {
            "model": self._config.model,
            "messages": [m.to_dict() for m in messages],
            "stream": False,
            "options": {
                "temperature": 0.7,
                "top_p": 0.9,
                "top_k": 40,
            },
        }
        try:
            resp = await self._async.post("/api/chat", json=data)
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Ollama API error: {e}")
            raise ProviderError(self.provider.value, str(e)) from e

        # Ollama returns { message: { role, content }, done: true, ... }
        message = payload.get("message") if isinstance(payload, dict) else None
        if isinstance(message, dict):
            return message.get("content") or ""
        return ""

    async def generate_test_code(self, page_content: str, test_objective: str, page_name: str) -> str:
        return await self.chat(build_test_code_messages(page_content, test_objective, page_name))

    async def is_available(self) -> bool:
        try:
            resp = await self._async.get("/api/tags", timeout=self._probe_timeout_seconds)
        except Exception as e:
            logger.warning(f"Ollama is not reachable at {self._config.url}: {e}")
            return False
        return resp.status_code == 200

    async def list_models(self) -> List[str]:
        try:
            resp = await self._async.get("/api/tags")
            resp.raise_for_status()
            payload = resp.json()
        except Exception as e:
            logger.error(f"Error listing Ollama models: {e}")
            return []

        models = payload.get("models") if isinstance(payload, dict) else None
        if not isinstance(models, list):
            return []
        return [m["name"] for m in models if isinstance(m, dict) and m.get("name")]

    async def aclose(self) -> None:
        await self._async.aclose()
