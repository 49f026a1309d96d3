from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from .client import UnifiedAIClient
from .config import AIClientSettings
from .providers.lmstudio import LMStudioProvider
from .providers.ollama import OllamaProvider
from .types import AIProvider

logger = logging.getLogger(__name__)


async def create_ai_client(
    preferred_provider: Optional[Union[AIProvider, str]] = None,
    settings: Optional[AIClientSettings] = None,
) -> UnifiedAIClient:
    """
    Build a client for the preferred backend, falling back from Ollama to LM Studio.

    Args:
        preferred_provider: Backend to try first. Defaults to `settings.provider`
            (the AI_PROVIDER environment variable), which defaults to Ollama.
        settings: Backend configuration. Read from the environment when omitted.

    Returns:
        UnifiedAIClient wrapping whichever backend was chosen. Check
        `get_provider()` to see which one that was.
    """
    settings = settings or AIClientSettings.from_env()
    if not preferred_provider:
        provider = settings.provider
    else:
        provider = AIProvider.parse(preferred_provider)

    logger.info(f"Attempting to create AI client with provider: {provider.value}")

    if provider is AIProvider.OLLAMA:
        ollama = OllamaProvider(settings.ollama)
        if await ollama.is_available():
            logger.info("Ollama is available and ready")
            return UnifiedAIClient(ollama, AIProvider.OLLAMA)

        logger.warning("Ollama is not available, falling back to LM Studio")
        await ollama.aclose()
        return UnifiedAIClient(LMStudioProvider(settings.lmstudio), AIProvider.LMSTUDIO)

    logger.info("Using LM Studio as specified")
    return UnifiedAIClient(LMStudioProvider(settings.lmstudio), AIProvider.LMSTUDIO)


async def create_default_ai_client(settings: Optional[AIClientSettings] = None) -> UnifiedAIClient:
    return await create_ai_client(AIProvider.OLLAMA, settings)


async def create_ollama_ai_client(settings: Optional[AIClientSettings] = None) -> UnifiedAIClient:
    return await create_ai_client(AIProvider.OLLAMA, settings)


async def create_lmstudio_ai_client(settings: Optional[AIClientSettings] = None) -> UnifiedAIClient:
    return await create_ai_client(AIProvider.LMSTUDIO, settings)


async def check_ai_providers(settings: Optional[AIClientSettings] = None) -> Dict[str, bool]:
    """
    Report which backends can be used.

    LM Studio has no probe, so it is always reported as available.
    """
    settings = settings or AIClientSettings.from_env()
    async with OllamaProvider(settings.ollama) as ollama:
        ollama_available = await ollama.is_available()
    return {
        AIProvider.OLLAMA.value: ollama_available,
        AIProvider.LMSTUDIO.value: True,
    }
