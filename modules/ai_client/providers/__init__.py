from .base import BaseProvider
from .lmstudio import LMStudioProvider
from .ollama import OllamaProvider

__all__ = [
    "BaseProvider",
    "LMStudioProvider",
    "OllamaProvider",
]
