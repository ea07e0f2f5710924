"""Provider for the Responses API (``<endpoint>/responses``).

The server keeps the conversation; each call sends one new input plus the id
of the previous response.  The answer text is read in two stages:

1. the top-level ``output_text`` convenience field;
2. the first ``output`` item with ``role == "assistant"`` — the ``text`` of
   its first content item.

Only when both stages come up empty is a :class:`ResponseShapeError` raised.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from multiturn_toolkit.llm._exceptions import ResponseShapeError
from multiturn_toolkit.llm._providers._base import BaseProvider
from multiturn_toolkit.llm._types import TurnResult, Usage


def _build_payload(
    model: str,
    input_text: str,
    *,
    instructions: str | None = None,
    previous_reference: str | None = None,
    **kwargs: Any,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"model": model, "input": input_text}
    if instructions:
        payload["instructions"] = instructions
    if previous_reference:
        payload["previous_response_id"] = previous_reference
    payload.update(kwargs)
    return payload


def _from_output_text(raw: dict[str, Any]) -> str | None:
    text = raw.get("output_text")
    if isinstance(text, str) and text:
        return text
    return None


def _from_assistant_output(raw: dict[str, Any]) -> str | None:
    output = raw.get("output")
    if not isinstance(output, list):
        return None
    assistant = next(
        (item for item in output if isinstance(item, dict) and item.get("role") == "assistant"),
        None,
    )
    if assistant is None:
        return None
    content = assistant.get("content")
    if not isinstance(content, list) or not content or not isinstance(content[0], dict):
        return None
    text = content[0].get("text")
    return text if isinstance(text, str) else None


_ANSWER_STAGES: tuple[Callable[[dict[str, Any]], str | None], ...] = (
    _from_output_text,
    _from_assistant_output,
)


def _extract_answer(raw: dict[str, Any]) -> str:
    for stage in _ANSWER_STAGES:
        answer = stage(raw)
        if answer is not None:
            return answer
    raise ResponseShapeError(
        "Unexpected response structure: no output_text or assistant output.", raw
    )


def _parse_response(raw: Any) -> TurnResult:
    if not isinstance(raw, dict):
        raise ResponseShapeError("Response payload is not a JSON object.", raw)

    answer = _extract_answer(raw)

    reference = raw.get("id")
    if not isinstance(reference, str) or not reference:
        raise ResponseShapeError("Response payload has no id to chain from.", raw)

    raw_usage = raw.get("usage")
    if not isinstance(raw_usage, dict):
        raw_usage = {}
    usage = Usage(
        input_tokens=raw_usage.get("input_tokens", 0),
        output_tokens=raw_usage.get("output_tokens", 0),
        total_tokens=raw_usage.get("total_tokens", 0),
    )
    return TurnResult(answer=answer, reference=reference, usage=usage, raw=raw)


class ResponsesProvider(BaseProvider):
    """Sends a single input chained to the previous response id."""

    api_name = "Responses API"

    @property
    def url(self) -> str:
        return self._config.responses_url

    def complete(
        self,
        input_text: str,
        *,
        instructions: str | None = None,
        previous_reference: str | None = None,
        model: str | None = None,
        **kwargs: Any,
    ) -> TurnResult:
        timeout = kwargs.pop("timeout", None)
        payload = _build_payload(
            model or self.model,
            input_text,
            instructions=instructions,
            previous_reference=previous_reference,
            **kwargs,
        )
        return _parse_response(self._post(payload, timeout))

    async def acomplete(
        self,
        input_text: str,
        *,
        instructions: str | None = None,
        previous_reference: str | None = None,
        model: str | None = None,
        **kwargs: Any,
    ) -> TurnResult:
        timeout = kwargs.pop("timeout", None)
        payload = _build_payload(
            model or self.model,
            input_text,
            instructions=instructions,
            previous_reference=previous_reference,
            **kwargs,
        )
        return _parse_response(await self._apost(payload, timeout))
