from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 30000


def _timeout_ms(value: Optional[str]) -> float:
    if not value:
        return DEFAULT_TIMEOUT_MS
    try:
        timeout_ms = float(value)
    except ValueError:
        logger.warning(f"Ignoring MCP_TIMEOUT={value!r}: expected milliseconds, using {DEFAULT_TIMEOUT_MS}")
        return DEFAULT_TIMEOUT_MS
    if not math.isfinite(timeout_ms) or timeout_ms <= 0:
        logger.warning(f"Ignoring MCP_TIMEOUT={value!r}: must be a positive number, using {DEFAULT_TIMEOUT_MS}")
        return DEFAULT_TIMEOUT_MS
    return timeout_ms


@dataclass(frozen=True)
class McpConfig:
    """Where the MCP server lives and how long to wait for each reply."""
    url: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_MS / 1000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "McpConfig":
        """
        Read MCP_SERVER_URL and MCP_TIMEOUT (milliseconds).

        Args:
            environ: Mapping to read from. When omitted, a `.env` file is loaded
                (if present) and `os.environ` is used.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        return cls(
            url=environ.get("MCP_SERVER_URL") or "",
            timeout_seconds=_timeout_ms(environ.get("MCP_TIMEOUT")) / 1000,
        )
