#!/usr/bin/env python3
import asyncio
import logging
import sys
sys.path.insert(0, "../.")

from ai_client import AIClientSettings, ChatMessage, check_ai_providers, create_ai_client
from mcp_channel import McpChannel, McpConfig, McpError

PAGE = """
<form id="login">
  <input id="email" type="email" placeholder="Email">
  <input id="password" type="password">
  <button id="go" type="submit">Sign in</button>
</form>
"""


async def demo_ai_client():
    settings = AIClientSettings.from_env()
    print("Provider health:", await check_ai_providers(settings))

    async with await create_ai_client(settings=settings) as client:
        print("Using provider:", client.get_provider().value)
        print("Models:", await client.list_models())

        reply = await client.chat([
            ChatMessage(role="system", content="You are a QA lead. Answer in less than 30 words."),
            ChatMessage(role="user", content="What makes a login test flaky?"),
        ])
        print("Chat reply:", reply)

        steps = await client.generate_test_steps(PAGE, "sign in with valid credentials")
        print("Steps:")
        for step in steps:
            print("  ", step)

        print("Test code:")
        print(await client.generate_test_code(PAGE, "sign in with valid credentials", "Login"))


async def demo_mcp_channel():
    config = McpConfig.from_env()
    if not config.url:
        print("MCP_SERVER_URL not set, skipping MCP demo")
        return
    try:
        async with McpChannel(config) as channel:
            print("MCP reply:", await channel.send({"method": "tools/list"}))
    except McpError as e:
        print("MCP demo failed:", e)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(demo_ai_client())
    asyncio.run(demo_mcp_channel())
