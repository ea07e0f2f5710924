"""Shared plumbing for the Azure OpenAI endpoint families."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from multiturn_toolkit.llm._async_http import async_post_json
from multiturn_toolkit.llm._auth import CredentialProvider
from multiturn_toolkit.llm._config import AzureOpenAIConfig
from multiturn_toolkit.llm._http import RetryConfig, post_json


class BaseProvider(ABC):
    """Posts JSON to one endpoint with a fresh bearer token per call."""

    api_name: str = ""

    def __init__(
        self,
        config: AzureOpenAIConfig,
        credential: CredentialProvider,
        *,
        retry: RetryConfig | None = None,
    ) -> None:
        self._config = config
        self._credential = credential
        self._retry = retry

    @property
    @abstractmethod
    def url(self) -> str: ...

    @property
    def model(self) -> str:
        return self._config.deployment

    @staticmethod
    def _headers(token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def _post(self, payload: dict[str, Any], timeout: int | None = None) -> Any:
        token = self._credential.get_token(self._config.scope)
        return post_json(
            self.url,
            self._headers(token),
            payload,
            timeout=timeout or self._config.timeout,
            retry=self._retry,
        )

    async def _apost(self, payload: dict[str, Any], timeout: int | None = None) -> Any:
        token = await self._credential.aget_token(self._config.scope)
        return await async_post_json(
            self.url,
            self._headers(token),
            payload,
            timeout=timeout or self._config.timeout,
            retry=self._retry,
        )
