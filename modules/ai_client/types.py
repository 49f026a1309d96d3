from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

SYSTEM = "system"
USER = "user"
ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


class AIProvider(str, Enum):
    """Local LLM backends the client can talk to."""
    OLLAMA = "ollama"
    LMSTUDIO = "lmstudio"

    @classmethod
    def parse(cls, value: str) -> "AIProvider":
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown AI provider: {value!r}")


@dataclass(frozen=True)
class ProviderCapabilities:
    """Optional operations a provider implements natively."""
    test_code: bool = False
    availability_probe: bool = False
    model_listing: bool = False
