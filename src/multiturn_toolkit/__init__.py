"""multiturn-toolkit — transcript-driven and chained conversations with Azure OpenAI."""

from multiturn_toolkit.llm import (
    APIError,
    AsyncCompletionClient,
    AuthError,
    AzureOpenAIConfig,
    AzureTokenProvider,
    CompletionClient,
    ConfigError,
    CredentialProvider,
    Err,
    Message,
    Ok,
    Outcome,
    ProviderError,
    RateLimitError,
    ResponseShapeError,
    RetryConfig,
    StaticTokenProvider,
    ToolkitError,
    TurnResult,
    Usage,
    create_credential_provider,
)
from multiturn_toolkit.sessions import (
    BaseSession,
    ChainedSession,
    RunReport,
    TranscriptSession,
    TurnEvent,
    TurnRecord,
    TurnRunner,
)

__all__ = [
    "APIError",
    "AsyncCompletionClient",
    "AuthError",
    "AzureOpenAIConfig",
    "AzureTokenProvider",
    "BaseSession",
    "ChainedSession",
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
    "RunReport",
    "StaticTokenProvider",
    "ToolkitError",
    "TranscriptSession",
    "TurnEvent",
    "TurnRecord",
    "TurnResult",
    "TurnRunner",
    "Usage",
    "create_credential_provider",
]
