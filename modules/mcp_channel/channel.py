"""
Request/response correlation over a single MCP WebSocket connection.

Each outgoing JSON object gets a random `id`; the reply carrying the same id
resolves that request. A single reader task owns the socket and hands frames
to the waiting request, so concurrent `send` calls never see each other's
replies.
"""

from __future__ import annotations

import asyncio
import json
import logging
import secrets
import string
from typing import Any, Dict, Mapping, Optional

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import ConnectionClosed, WebSocketException

from .config import McpConfig
from .errors import McpConnectionError, McpTimeoutError

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 11


def generate_request_id() -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


class McpChannel:
    """
    One WebSocket connection to an MCP server.

    Usage:
        async with McpChannel(McpConfig.from_env()) as channel:
            response = await channel.send({"type": "ping"})
    """

    def __init__(self, config: Optional[McpConfig] = None):
        self._config = config or McpConfig.from_env()
        self._ws: Optional[ClientConnection] = None
        self._reader: Optional[asyncio.Task] = None
        self._pending: Dict[str, asyncio.Future] = {}

    @property
    def config(self) -> McpConfig:
        return self._config

    @property
    def is_connected(self) -> bool:
        return self._ws is not None and self._reader is not None and not self._reader.done()

    async def connect(self) -> "McpChannel":
        """
        Open the connection and start reading replies.

        Raises:
            McpConnectionError: If no URL is configured or the connection cannot be opened
        """
        if self.is_connected:
            return self
        if not self._config.url:
            raise McpConnectionError("MCP server URL is not configured (set MCP_SERVER_URL)")

        try:
            self._ws = await connect(self._config.url)
        except (OSError, asyncio.TimeoutError, WebSocketException) as e:
            logger.error(f"MCP connection error: {e}")
            raise McpConnectionError(f"Could not connect to {self._config.url}: {e}") from e

        logger.info("Connected to MCP server.")
        self._reader = asyncio.create_task(self._read_loop())
        return self

    async def send(self, message: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Send one message and wait for the reply with the same id.

        Args:
            message: JSON-serializable object; an `id` field is added (and overrides any existing one)

        Returns:
            The parsed reply

        Raises:
            McpConnectionError: If the channel is not connected or closes before the reply
            McpTimeoutError: If no matching reply arrives within the configured timeout
        """
        if not self.is_connected:
            raise McpConnectionError("MCP channel is not connected")

        request_id = generate_request_id()
        future: asyncio.Future = asyncio.get_running_loop().create_future()
        self._pending[request_id] = future
        try:
            try:
                await self._ws.send(json.dumps({**message, "id": request_id}))
            except ConnectionClosed as e:
                raise McpConnectionError(f"MCP connection closed: {e}") from e
            return await asyncio.wait_for(future, timeout=self._config.timeout_seconds)
        except asyncio.TimeoutError as e:
            raise McpTimeoutError("MCP timeout") from e
        finally:
            self._pending.pop(request_id, None)

    async def close(self) -> None:
        if self._ws is not None:
            await self._ws.close()
        if self._reader is not None:
            await self._reader
        self._ws = None
        self._reader = None

    async def _read_loop(self) -> None:
        try:
            async for raw in self._ws:
                self._dispatch(raw)
        except ConnectionClosed:
            pass
        finally:
            logger.info("MCP connection closed.")
            for future in self._pending.values():
                if not future.done():
                    future.set_exception(McpConnectionError("MCP connection closed before a reply arrived"))

    def _dispatch(self, raw: Any) -> None:
        try:
            response = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Skipping unparsable MCP frame")
            return
        if not isinstance(response, dict):
            logger.warning("Skipping MCP frame that is not a JSON object")
            return

        request_id = response.get("id")
        if not isinstance(request_id, str):
            return
        future = self._pending.get(request_id)
        if future is not None and not future.done():
            future.set_result(response)

    async def __aenter__(self) -> "McpChannel":
        return await self.connect()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


async def connect_to_mcp(config: Optional[McpConfig] = None) -> McpChannel:
    return await McpChannel(config).connect()


async def send_mcp_message(channel: McpChannel, message: Mapping[str, Any]) -> Dict[str, Any]:
    return await channel.send(message)
