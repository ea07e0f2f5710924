"""Provider for the Chat Completions API (``<endpoint>/chat/completions``)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from multiturn_toolkit.llm._exceptions import ResponseShapeError
from multiturn_toolkit.llm._providers._base import BaseProvider
from multiturn_toolkit.llm._types import Message, TurnResult, Usage


def _build_payload(
    model: str,
    messages: Sequence[Message],
    max_tokens: int | None,
    **kwargs: Any,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "model": model,
        "messages": [m.to_wire() for m in messages],
    }
    if max_tokens is not None:
        payload["max_tokens"] = max_tokens
    # Pass through remaining kwargs
    payload.update(kwargs)
    return payload


def _parse_response(raw: Any) -> TurnResult:
    """Read ``choices[0].message.content``; anything else is a shape error."""
    if not isinstance(raw, dict):
        raise ResponseShapeError("Chat completion payload is not a JSON object.", raw)

    choices = raw.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        raise ResponseShapeError("Chat completion payload has no choices.", raw)

    message = choices[0].get("message")
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise ResponseShapeError("Chat completion choice carries no message content.", raw)

    raw_usage = raw.get("usage")
    if not isinstance(raw_usage, dict):
        raw_usage = {}
    usage = Usage(
        input_tokens=raw_usage.get("prompt_tokens", 0),
        output_tokens=raw_usage.get("completion_tokens", 0),
        total_tokens=raw_usage.get("total_tokens", 0),
    )
    return TurnResult(answer=content, usage=usage, raw=raw)


class ChatCompletionsProvider(BaseProvider):
    """Sends the whole message list on every call."""

    api_name = "Chat Completions API"

    @property
    def url(self) -> str:
        return self._config.chat_url

    def _payload(
        self, messages: Sequence[Message], model: str | None, kwargs: dict[str, Any]
    ) -> dict[str, Any]:
        max_tokens = kwargs.pop("max_tokens", self._config.max_tokens)
        return _build_payload(model or self.model, messages, max_tokens, **kwargs)

    def complete(
        self,
        messages: Sequence[Message],
        *,
        model: str | None = None,
        **kwargs: Any,
    ) -> TurnResult:
        timeout = kwargs.pop("timeout", None)
        payload = self._payload(messages, model, kwargs)
        return _parse_response(self._post(payload, timeout))

    async def acomplete(
        self,
        messages: Sequence[Message],
        *,
        model: str | None = None,
        **kwargs: Any,
    ) -> TurnResult:
        timeout = kwargs.pop("timeout", None)
        payload = self._payload(messages, model, kwargs)
        return _parse_response(await self._apost(payload, timeout))
