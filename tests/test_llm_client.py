"""
Tests for the Groq client wrapper (SDK mocked, no network).
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from career_guide.services.llm_client import (
    LLMClient,
    LLMEmptyResponseError,
    LLMNotConfiguredError,
    LLMUpstreamError,
)

GROQ_URL = "https://api.groq.com/openai/v1/chat/completions"


def completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def mock_sdk(**create_kwargs):
    sdk = MagicMock()
    sdk.chat.completions.create = AsyncMock(**create_kwargs)
    return sdk


class TestComplete:
    """Tests for LLMClient.complete."""

    @pytest.mark.asyncio
    async def test_returns_content(self):
        sdk = mock_sdk(return_value=completion("[1, 2]"))
        llm = LLMClient(api_key="k", model="llama-3.3-70b-versatile", max_tokens=4096, client=sdk)

        text = await llm.complete("system text", "user text", temperature=0.4)

        assert text == "[1, 2]"
        kwargs = sdk.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "llama-3.3-70b-versatile"
        assert kwargs["temperature"] == 0.4
        assert kwargs["max_tokens"] == 4096
        assert kwargs["messages"] == [
            {"role": "system", "content": "system text"},
            {"role": "user", "content": "user text"},
        ]

    @pytest.mark.asyncio
    async def test_empty_content(self):
        llm = LLMClient(api_key="k", model="m", client=mock_sdk(return_value=completion(None)))
        with pytest.raises(LLMEmptyResponseError) as exc_info:
            await llm.complete("s", "u")
        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "No content in Groq response"

    @pytest.mark.asyncio
    async def test_no_choices(self):
        llm = LLMClient(api_key="k", model="m", client=mock_sdk(return_value=SimpleNamespace(choices=[])))
        with pytest.raises(LLMEmptyResponseError):
            await llm.complete("s", "u")

    @pytest.mark.asyncio
    async def test_status_error(self):
        response = httpx.Response(429, request=httpx.Request("POST", GROQ_URL), text='{"error":"rate"}')
        error = openai.RateLimitError("rate limited", response=response, body=None)
        llm = LLMClient(api_key="k", model="m", client=mock_sdk(side_effect=error))

        with pytest.raises(LLMUpstreamError) as exc_info:
            await llm.complete("s", "u")

        assert exc_info.value.status_code == 429
        assert exc_info.value.message == "Groq API error: 429"
        assert exc_info.value.details == '{"error":"rate"}'

    @pytest.mark.asyncio
    async def test_connection_error(self):
        error = openai.APIConnectionError(request=httpx.Request("POST", GROQ_URL))
        llm = LLMClient(api_key="k", model="m", client=mock_sdk(side_effect=error))

        with pytest.raises(LLMUpstreamError) as exc_info:
            await llm.complete("s", "u")

        assert exc_info.value.status_code == 502


class TestConfiguration:
    """Tests for lazy client creation."""

    @pytest.mark.asyncio
    async def test_missing_key(self):
        llm = LLMClient(api_key=None, model="m")
        with pytest.raises(LLMNotConfiguredError, match="GROQ_API_KEY"):
            await llm.complete("s", "u")

    def test_client_created_lazily(self):
        llm = LLMClient(api_key="k", model="m", base_url="https://api.groq.com/openai/v1")
        assert llm._client is None
        sdk = llm.client
        assert isinstance(sdk, openai.AsyncOpenAI)
        assert llm.client is sdk
