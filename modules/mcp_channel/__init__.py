from .channel import McpChannel, connect_to_mcp, generate_request_id, send_mcp_message
from .config import McpConfig
from .errors import McpConnectionError, McpError, McpTimeoutError

__all__ = [
    "McpChannel",
    "McpConfig",
    "McpError",
    "McpConnectionError",
    "McpTimeoutError",
    "connect_to_mcp",
    "generate_request_id",
    "send_mcp_message",
]
