from .client import UnifiedAIClient, render_test_code
from .config import AIClientSettings, ProviderConfig
from .errors import AIClientError, ProviderError
from .factory import (
    check_ai_providers,
    create_ai_client,
    create_default_ai_client,
    create_lmstudio_ai_client,
    create_ollama_ai_client,
)
from .parsing import parse_test_steps
from .providers import BaseProvider, LMStudioProvider, OllamaProvider
from .types import AIProvider, ChatMessage, ProviderCapabilities

__all__ = [
    "UnifiedAIClient",
    "render_test_code",
    "AIClientSettings",
    "ProviderConfig",
    "AIClientError",
    "ProviderError",
    "check_ai_providers",
    "create_ai_client",
    "create_default_ai_client",
    "create_lmstudio_ai_client",
    "create_ollama_ai_client",
    "parse_test_steps",
    "BaseProvider",
    "LMStudioProvider",
    "OllamaProvider",
    "AIProvider",
    "ChatMessage",
    "ProviderCapabilities",
]
