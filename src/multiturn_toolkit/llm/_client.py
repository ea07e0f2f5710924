"""CompletionClient — the synchronous entry point to both call shapes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from multiturn_toolkit.llm._auth import CredentialProvider, create_credential_provider
from multiturn_toolkit.llm._config import AzureOpenAIConfig
from multiturn_toolkit.llm._http import RetryConfig
from multiturn_toolkit.llm._providers import ChatCompletionsProvider, ResponsesProvider
from multiturn_toolkit.llm._types import Message, TurnResult


class CompletionClient:
    """Authenticated access to one Azure OpenAI deployment.

    Usage::

        from multiturn_toolkit import AzureOpenAIConfig, CompletionClient, Message

        client = CompletionClient(AzureOpenAIConfig.from_env())
        result = client.complete_chat([Message("user", "Hello!")])
        print(result.answer)

    The client never retries on its own unless a ``RetryConfig`` is passed;
    retries then happen inside the transport, below any session.
    """

    def __init__(
        self,
        config: AzureOpenAIConfig,
        credential: CredentialProvider | None = None,
        *,
        retry: RetryConfig | None = None,
    ) -> None:
        credential = credential or create_credential_provider(config)
        self.config = config
        self._chat = ChatCompletionsProvider(config, credential, retry=retry)
        self._responses = ResponsesProvider(config, credential, retry=retry)

    def complete_chat(
        self,
        messages: Sequence[Message],
        *,
        model: str | None = None,
        **kwargs: Any,
    ) -> TurnResult:
        """Send the full message list to the Chat Completions API."""
        return self._chat.complete(messages, model=model, **kwargs)

    def complete_chained(
        self,
        input_text: str,
        *,
        instructions: str | None = None,
        previous_reference: str | None = None,
        model: str | None = None,
        **kwargs: Any,
    ) -> TurnResult:
        """Send one input to the Responses API, chained to ``previous_reference``."""
        return self._responses.complete(
            input_text,
            instructions=instructions,
            previous_reference=previous_reference,
            model=model,
            **kwargs,
        )
