"""Explicit configuration for an Azure OpenAI deployment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from multiturn_toolkit.llm._exceptions import ConfigError

ENDPOINT_ENV = "AZURE_OPENAI_API_BASE"
DEPLOYMENT_ENV = "AZURE_OPENAI_API_DEPLOY"
TOKEN_ENV = "AZURE_OPENAI_API_TOKEN"

COGNITIVE_SERVICES_SCOPE = "https://cognitiveservices.azure.com/.default"


@dataclass(frozen=True, slots=True)
class AzureOpenAIConfig:
    """Endpoint, deployment and request defaults for one Azure OpenAI resource.

    Usage::

        config = AzureOpenAIConfig.from_env()
        client = CompletionClient(config, create_credential_provider(config))
    """

    endpoint: str
    deployment: str
    scope: str = COGNITIVE_SERVICES_SCOPE
    max_tokens: int | None = 150
    timeout: int = 60
    api_token: str | None = None

    def __post_init__(self) -> None:
        required = ((ENDPOINT_ENV, self.endpoint), (DEPLOYMENT_ENV, self.deployment))
        missing = [env_var for env_var, value in required if not value or not value.strip()]
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AzureOpenAIConfig:
        """Build a config from ``AZURE_OPENAI_API_BASE`` / ``AZURE_OPENAI_API_DEPLOY``.

        ``AZURE_OPENAI_API_TOKEN`` is optional; when set it is used as a static
        bearer token instead of Entra ID.
        """
        env = os.environ if environ is None else environ
        return cls(
            endpoint=env.get(ENDPOINT_ENV, ""),
            deployment=env.get(DEPLOYMENT_ENV, ""),
            api_token=env.get(TOKEN_ENV) or None,
        )

    def url_for(self, path: str) -> str:
        return f"{self.endpoint.rstrip('/')}/{path.lstrip('/')}"

    @property
    def chat_url(self) -> str:
        return self.url_for("chat/completions")

    @property
    def responses_url(self) -> str:
        return self.url_for("responses")
