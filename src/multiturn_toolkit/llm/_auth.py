"""Credential providers that hand out bearer tokens per outbound request."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from azure.core.exceptions import ClientAuthenticationError
from azure.identity import DefaultAzureCredential, get_bearer_token_provider
from azure.identity.aio import DefaultAzureCredential as AsyncDefaultAzureCredential
from azure.identity.aio import get_bearer_token_provider as aio_get_bearer_token_provider

from multiturn_toolkit.llm._exceptions import AuthError

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential
    from azure.core.credentials_async import AsyncTokenCredential

    from multiturn_toolkit.llm._config import AzureOpenAIConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class CredentialProvider(Protocol):
    """Anything that can produce a bearer token for a scope."""

    def get_token(self, scope: str) -> str: ...

    async def aget_token(self, scope: str) -> str: ...


class StaticTokenProvider:
    """Returns the same pre-issued token for every request."""

    def __init__(self, token: str) -> None:
        if not token:
            raise AuthError("Static bearer token is empty.", hint="Set a non-empty token.")
        self._token = token

    def get_token(self, scope: str) -> str:
        return self._token

    async def aget_token(self, scope: str) -> str:
        return self._token


class AzureTokenProvider:
    """Microsoft Entra ID tokens via ``azure-identity``.

    Token caching and refresh are left to ``get_bearer_token_provider``; this
    class only keeps one provider closure per scope and turns credential
    failures into :class:`AuthError`. ``aget_token`` goes through the
    ``azure.identity.aio`` credential so the event loop is never blocked.
    """

    def __init__(
        self,
        credential: TokenCredential | None = None,
        async_credential: AsyncTokenCredential | None = None,
    ) -> None:
        self._credential = credential
        self._async_credential = async_credential
        self._owns_async_credential = async_credential is None
        self._providers: dict[str, Callable[[], str]] = {}
        self._async_providers: dict[str, Callable[[], Awaitable[str]]] = {}

    def _provider_for(self, scope: str) -> Callable[[], str]:
        if scope not in self._providers:
            if self._credential is None:
                self._credential = DefaultAzureCredential()
            self._providers[scope] = get_bearer_token_provider(self._credential, scope)
        return self._providers[scope]

    def _async_provider_for(self, scope: str) -> Callable[[], Awaitable[str]]:
        if scope not in self._async_providers:
            if self._async_credential is None:
                self._async_credential = AsyncDefaultAzureCredential()
            self._async_providers[scope] = aio_get_bearer_token_provider(
                self._async_credential, scope
            )
        return self._async_providers[scope]

    @staticmethod
    def _auth_error(scope: str, exc: ClientAuthenticationError) -> AuthError:
        logger.warning("Credential provider failed for scope %s: %s", scope, exc.message)
        return AuthError(f"Could not acquire a token for {scope}: {exc.message}")

    def get_token(self, scope: str) -> str:
        try:
            return self._provider_for(scope)()
        except ClientAuthenticationError as exc:
            raise self._auth_error(scope, exc) from exc

    async def aget_token(self, scope: str) -> str:
        try:
            return await self._async_provider_for(scope)()
        except ClientAuthenticationError as exc:
            raise self._auth_error(scope, exc) from exc

    async def aclose(self) -> None:
        """Close the async credential if this provider created it."""
        if self._owns_async_credential and self._async_credential is not None:
            await self._async_credential.close()
            self._async_credential = None
            self._async_providers.clear()


def create_credential_provider(config: AzureOpenAIConfig) -> CredentialProvider:
    """Pick a static provider when the config carries a token, Entra ID otherwise."""
    if config.api_token:
        return StaticTokenProvider(config.api_token)
    return AzureTokenProvider()
