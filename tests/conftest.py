"""Shared test fixtures."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from multiturn_toolkit.llm._config import AzureOpenAIConfig


class FakeCredential:
    """Hands out numbered tokens and counts how often it was asked."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[str] = []
        self._error = error

    def get_token(self, scope: str) -> str:
        self.calls.append(scope)
        if self._error is not None:
            raise self._error
        return f"token-{len(self.calls)}"

    async def aget_token(self, scope: str) -> str:
        return self.get_token(scope)


class MockResponse:
    """Mimics ``requests.Response`` for testing post_json."""

    def __init__(
        self,
        json_data: Any = None,
        status_code: int = 200,
        text: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self._json_data = json_data
        self.text = text or ""
        self.ok = 200 <= status_code < 300
        self.headers: dict[str, str] = headers or {}

    def json(self) -> Any:
        if self._json_data is None:
            raise ValueError("No JSON")
        return self._json_data


@pytest.fixture
def config() -> AzureOpenAIConfig:
    return AzureOpenAIConfig(
        endpoint="https://example.openai.azure.com/openai/v1/",
        deployment="gpt-4o-mini",
    )


@pytest.fixture
def credential() -> FakeCredential:
    return FakeCredential()


@pytest.fixture
def mock_post(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.post`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.post", mock)
    return mock
