from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

import httpx

from ..config import DEFAULT_LM_STUDIO_API_KEY, DEFAULT_LM_STUDIO_MODEL, DEFAULT_LM_STUDIO_URL, ProviderConfig
from ..errors import ProviderError
from ..types import AIProvider, ChatMessage
from .base import BaseProvider

logger = logging.getLogger(__name__)


class LMStudioProvider(BaseProvider):
    """Provider for LM Studio's OpenAI-compatible `/v1/chat/completions` endpoint."""

    provider = AIProvider.LMSTUDIO

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        timeout_seconds: Optional[float] = None,
        extra_headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self._config = config or ProviderConfig(
            url=DEFAULT_LM_STUDIO_URL,
            model=DEFAULT_LM_STUDIO_MODEL,
            api_key=DEFAULT_LM_STUDIO_API_KEY,
        )
        self._timeout_seconds = timeout_seconds
        self._headers: Dict[str, str] = {
            "Content-Type": "application/json",
        }
        if self._config.api_key:
            self._headers["Authorization"] = f"Bearer {self._config.api_key}"
        if extra_headers:
            self._headers.update(extra_headers)

        self._async = httpx.AsyncClient(base_url=self._config.url, timeout=self._timeout_seconds, headers=self._headers)

    @property
    def config(self) -> ProviderConfig:
        return self._config

    async def chat(self, messages: Iterable[ChatMessage]) -> str:
        data: Dict[str, Any] = {
            "model": self._config.model,
            "messages": [m.to_dict() for m in messages],
            "temperature": 0.7,
            "max_tokens": 1000,
            "stream": False,
        }
        try:
            resp = await self._async.post("/v1/chat/completions", json=data)
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"LM Studio API error: {e}")
            raise ProviderError(self.provider.value, str(e)) from e

        choices = payload.get("choices") if isinstance(payload, dict) else None
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return ""
        message = choices[0].get("message")
        if not isinstance(message, dict):
            return ""
        return message.get("content") or ""

    async def aclose(self) -> None:
        await self._async.aclose()
