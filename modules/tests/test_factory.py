import httpx
import pytest
import respx

from ai_client.config import AIClientSettings, ProviderConfig
from ai_client.factory import (
    check_ai_providers,
    create_ai_client,
    create_default_ai_client,
    create_lmstudio_ai_client,
)
from ai_client.types import AIProvider

OLLAMA_TAGS = "http://ollama.test:11434/api/tags"


def make_settings(provider=AIProvider.OLLAMA):
    return AIClientSettings(
        ollama=ProviderConfig(url="http://ollama.test:11434", model="llama3"),
        lmstudio=ProviderConfig(url="http://lmstudio.test:1234", model="qwen3-4b", api_key="lm-studio"),
        provider=provider,
    )


@pytest.mark.asyncio
@respx.mock
async def test_ollama_selected_when_available():
    route = respx.get(OLLAMA_TAGS).mock(return_value=httpx.Response(200, json={"models": []}))

    async with await create_ai_client(AIProvider.OLLAMA, make_settings()) as client:
        assert client.get_provider() is AIProvider.OLLAMA
        assert client.capabilities.test_code is True

    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_falls_back_to_lmstudio_when_ollama_unreachable():
    respx.get(OLLAMA_TAGS).mock(side_effect=httpx.ConnectError("refused"))

    async with await create_ai_client(AIProvider.OLLAMA, make_settings()) as client:
        assert client.get_provider() is AIProvider.LMSTUDIO


@pytest.mark.asyncio
@respx.mock
async def test_falls_back_to_lmstudio_on_non_200_probe():
    respx.get(OLLAMA_TAGS).mock(return_value=httpx.Response(500))

    async with await create_default_ai_client(make_settings()) as client:
        assert client.get_provider() is AIProvider.LMSTUDIO


@pytest.mark.asyncio
@respx.mock(assert_all_called=False)
async def test_lmstudio_preference_skips_probe():
    route = respx.get(OLLAMA_TAGS).mock(return_value=httpx.Response(200, json={"models": []}))

    async with await create_lmstudio_ai_client(make_settings()) as client:
        assert client.get_provider() is AIProvider.LMSTUDIO

    assert not route.called


@pytest.mark.asyncio
@respx.mock
async def test_settings_provider_used_when_no_argument():
    async with await create_ai_client(settings=make_settings(provider=AIProvider.LMSTUDIO)) as client:
        assert client.get_provider() is AIProvider.LMSTUDIO


@pytest.mark.asyncio
@respx.mock
async def test_string_preference_is_parsed():
    async with await create_ai_client("LMStudio", make_settings()) as client:
        assert client.get_provider() is AIProvider.LMSTUDIO


@pytest.mark.asyncio
async def test_unknown_preference_raises():
    with pytest.raises(ValueError):
        await create_ai_client("openai", make_settings())


@pytest.mark.asyncio
@respx.mock
async def test_check_ai_providers():
    respx.get(OLLAMA_TAGS).mock(side_effect=httpx.ConnectError("refused"))

    assert await check_ai_providers(make_settings()) == {"ollama": False, "lmstudio": True}


@pytest.mark.asyncio
@respx.mock
async def test_empty_string_preference_uses_settings():
    async with await create_ai_client("", make_settings(provider=AIProvider.LMSTUDIO)) as client:
        assert client.get_provider() is AIProvider.LMSTUDIO
