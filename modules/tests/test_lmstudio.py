import json

import httpx
import pytest
import respx

from ai_client.config import ProviderConfig
from ai_client.errors import ProviderError
from ai_client.providers.lmstudio import LMStudioProvider
from ai_client.types import ChatMessage


def make_provider(api_key="sk-123"):
    return LMStudioProvider(ProviderConfig(url="http://localhost:1234", model="qwen3-4b", api_key=api_key))


@pytest.mark.asyncio
@respx.mock
async def test_chat_completion():
    route = respx.post("http://localhost:1234/v1/chat/completions").mock(
        return_value=httpx.Response(
            200,
            json={
                "id": "chatcmpl-123",
                "model": "qwen3-4b",
                "choices": [
                    {"index": 0, "message": {"role": "assistant", "content": "Hello!"}}
                ],
            },
        )
    )
    async with make_provider() as provider:
        reply = await provider.chat([ChatMessage(role="user", content="hi")])

    assert route.called
    assert reply == "Hello!"
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer sk-123"
    assert json.loads(request.content) == {
        "model": "qwen3-4b",
        "messages": [{"role": "user", "content": "hi"}],
        "temperature": 0.7,
        "max_tokens": 1000,
        "stream": False,
    }


@pytest.mark.asyncio
@respx.mock
async def test_chat_without_api_key_sends_no_authorization():
    route = respx.post("http://localhost:1234/v1/chat/completions").mock(
        return_value=httpx.Response(200, json={"choices": [{"message": {"content": "ok"}}]})
    )
    async with make_provider(api_key=None) as provider:
        await provider.chat([ChatMessage(role="user", content="hi")])

    assert "Authorization" not in route.calls.last.request.headers


@pytest.mark.asyncio
@respx.mock
async def test_chat_empty_choices_returns_empty_string():
    respx.post("http://localhost:1234/v1/chat/completions").mock(
        return_value=httpx.Response(200, json={"choices": []})
    )
    async with make_provider() as provider:
        assert await provider.chat([ChatMessage(role="user", content="hi")]) == ""


@pytest.mark.asyncio
@respx.mock
async def test_chat_transport_error_raises_provider_error():
    respx.post("http://localhost:1234/v1/chat/completions").mock(side_effect=httpx.ConnectError("refused"))
    async with make_provider() as provider:
        with pytest.raises(ProviderError) as excinfo:
            await provider.chat([ChatMessage(role="user", content="hi")])

    assert excinfo.value.provider == "lmstudio"


@pytest.mark.asyncio
@respx.mock
async def test_generate_test_steps_from_fenced_block():
    reply = "Here you go:\n```json\n[\"await page.goto('/');\", \"await page.click('#go');\"]\n```\nGood luck!"
    respx.post("http://localhost:1234/v1/chat/completions").mock(
        return_value=httpx.Response(200, json={"choices": [{"message": {"content": reply}}]})
    )
    async with make_provider() as provider:
        steps = await provider.generate_test_steps("<button id='go'>Go</button>", "click go")

    assert steps == ["await page.goto('/');", "await page.click('#go');"]


@pytest.mark.asyncio
@respx.mock
async def test_analyze_page_structure_returns_raw_reply():
    respx.post("http://localhost:1234/v1/chat/completions").mock(
        return_value=httpx.Response(200, json={"choices": [{"message": {"content": "One form, two buttons."}}]})
    )
    async with make_provider() as provider:
        analysis = await provider.analyze_page_structure("<form><button/><button/></form>")

    assert analysis == "One form, two buttons."


@pytest.mark.asyncio
async def test_optional_capabilities_are_not_implemented():
    async with make_provider() as provider:
        assert provider.capabilities.test_code is False
        with pytest.raises(NotImplementedError):
            await provider.is_available()
        with pytest.raises(NotImplementedError):
            await provider.list_models()
        with pytest.raises(NotImplementedError):
            await provider.generate_test_code("<p/>", "objective", "Page")
