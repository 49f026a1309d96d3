from __future__ import annotations


class McpError(Exception):
    """Base class for MCP channel errors."""


class McpConnectionError(McpError):
    """The WebSocket could not be opened, or closed while a request was pending."""


class McpTimeoutError(McpError, TimeoutError):
    """No response carrying the request id arrived before the deadline."""
