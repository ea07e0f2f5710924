"""Authenticated completion clients for Azure OpenAI deployments."""

from multiturn_toolkit.llm._async_client import AsyncCompletionClient
from multiturn_toolkit.llm._auth import (
    AzureTokenProvider,
    CredentialProvider,
    StaticTokenProvider,
    create_credential_provider,
)
from multiturn_toolkit.llm._client import CompletionClient
from multiturn_toolkit.llm._config import COGNITIVE_SERVICES_SCOPE, AzureOpenAIConfig
from multiturn_toolkit.llm._exceptions import (
    APIError,
    AuthError,
    ConfigError,
    ProviderError,
    RateLimitError,
    ResponseShapeError,
    ToolkitError,
)
from multiturn_toolkit.llm._http import RetryConfig
from multiturn_toolkit.llm._types import Err, Message, Ok, Outcome, TurnResult, Usage

__all__ = [
    "COGNITIVE_SERVICES_SCOPE",
    "APIError",
    "AsyncCompletionClient",
    "AuthError",
    "AzureOpenAIConfig",
    "AzureTokenProvider",
    "CompletionClient",
    "ConfigError",
    "CredentialProvider",
    "Err",
    "Message",
    "Ok",
    "Outcome",
    "ProviderError",
    "RateLimitError",
    "ResponseShapeError",
    "RetryConfig",
    "StaticTokenProvider",
    "ToolkitError",
    "TurnResult",
    "Usage",
    "create_credential_provider",
]
