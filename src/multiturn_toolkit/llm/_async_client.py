"""AsyncCompletionClient — the async entry point to both call shapes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from multiturn_toolkit.llm._auth import CredentialProvider, create_credential_provider
from multiturn_toolkit.llm._config import AzureOpenAIConfig
from multiturn_toolkit.llm._http import RetryConfig
from multiturn_toolkit.llm._providers import ChatCompletionsProvider, ResponsesProvider
from multiturn_toolkit.llm._types import Message, TurnResult


class AsyncCompletionClient:
    """Async counterpart of :class:`CompletionClient` (httpx transport).

    Usage::

        client = AsyncCompletionClient(AzureOpenAIConfig.from_env())
        result = await client.complete_chained("Hello!")
        print(result.answer, result.reference)
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
        self.credential = credential
        self._chat = ChatCompletionsProvider(config, credential, retry=retry)
        self._responses = ResponsesProvider(config, credential, retry=retry)

    async def complete_chat(
        self,
        messages: Sequence[Message],
        *,
        model: str | None = None,
        **kwargs: Any,
    ) -> TurnResult:
        """Send the full message list to the Chat Completions API."""
        return await self._chat.acomplete(messages, model=model, **kwargs)

    async def complete_chained(
        self,
        input_text: str,
        *,
        instructions: str | None = None,
        previous_reference: str | None = None,
        model: str | None = None,
        **kwargs: Any,
    ) -> TurnResult:
        """Send one input to the Responses API, chained to ``previous_reference``."""
        return await self._responses.acomplete(
            input_text,
            instructions=instructions,
            previous_reference=previous_reference,
            model=model,
            **kwargs,
        )

    async def aclose(self) -> None:
        """Release the credential's async transport, if it holds one."""
        aclose = getattr(self.credential, "aclose", None)
        if aclose is not None:
            await aclose()
