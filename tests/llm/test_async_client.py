"""Tests for the AsyncCompletionClient."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from multiturn_toolkit.llm._async_client import AsyncCompletionClient
from multiturn_toolkit.llm._config import AzureOpenAIConfig
from multiturn_toolkit.llm._exceptions import RateLimitError
from multiturn_toolkit.llm._types import Message
from tests.conftest import FakeCredential


@pytest.fixture
def mock_apost():
    with patch(
        "multiturn_toolkit.llm._providers._base.async_post_json", new_callable=AsyncMock
    ) as mock:
        yield mock


async def test_async_complete_chat(
    mock_apost: AsyncMock, config: AzureOpenAIConfig, credential: FakeCredential
) -> None:
    mock_apost.return_value = {"choices": [{"message": {"content": "Hello!"}}]}
    client = AsyncCompletionClient(config, credential)
    result = await client.complete_chat([Message("system", "s"), Message("user", "Hi")])

    assert result.answer == "Hello!"
    url, headers, payload = mock_apost.call_args.args
    assert url == config.chat_url
    assert headers["Authorization"] == "Bearer token-1"
    assert len(payload["messages"]) == 2


async def test_async_complete_chained(
    mock_apost: AsyncMock, config: AzureOpenAIConfig, credential: FakeCredential
) -> None:
    mock_apost.return_value = {"id": "resp_9", "output_text": "Yes."}
    client = AsyncCompletionClient(config, credential)
    result = await client.complete_chained("Again?", previous_reference="resp_8")

    assert result.reference == "resp_9"
    payload = mock_apost.call_args.args[2]
    assert payload == {"model": "gpt-4o-mini", "input": "Again?", "previous_response_id": "resp_8"}


async def test_async_errors_propagate(
    mock_apost: AsyncMock, config: AzureOpenAIConfig, credential: FakeCredential
) -> None:
    mock_apost.side_effect = RateLimitError(429, {"error": "slow down"}, retry_after=2.0)
    client = AsyncCompletionClient(config, credential)
    with pytest.raises(RateLimitError):
        await client.complete_chained("Hi")


async def test_aclose_closes_credential(config: AzureOpenAIConfig) -> None:
    credential = MagicMock()
    credential.aclose = AsyncMock()
    client = AsyncCompletionClient(config, credential)
    await client.aclose()
    credential.aclose.assert_awaited_once_with()


async def test_aclose_without_closable_credential(
    config: AzureOpenAIConfig, credential: FakeCredential
) -> None:
    await AsyncCompletionClient(config, credential).aclose()
    assert credential.calls == []
