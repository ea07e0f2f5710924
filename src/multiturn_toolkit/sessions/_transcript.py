"""Client-owned conversation: the whole transcript is replayed every call."""

from __future__ import annotations

import logging
from typing import Any

from multiturn_toolkit.llm._types import Message, TurnResult
from multiturn_toolkit.sessions._base import DEFAULT_SYSTEM_PROMPT, BaseSession

logger = logging.getLogger(__name__)


class TranscriptSession(BaseSession):
    """Multi-turn chat over the Chat Completions API.

    The transcript starts with the system message and grows by one user and
    one assistant message per successful turn.  A failed turn is not rolled
    back: its user message stays in place and is resent, unanswered, ahead of
    the next prompt.
    """

    kind = "transcript"

    def __init__(
        self,
        client: Any,
        system: str | None = DEFAULT_SYSTEM_PROMPT,
        *,
        model: str | None = None,
        **request_options: Any,
    ) -> None:
        super().__init__(client)
        self._model = model
        self._options = request_options
        self._transcript: list[Message] = []
        if system:
            self._transcript.append(Message(role="system", content=system))

    @property
    def transcript(self) -> tuple[Message, ...]:
        return tuple(self._transcript)

    def _record_user(self, user_text: str) -> tuple[Message, ...]:
        self._transcript.append(Message(role="user", content=user_text))
        return tuple(self._transcript)

    def _record_answer(self, result: TurnResult) -> str:
        self._transcript.append(result.to_message())
        self.last_result = result
        logger.debug("Transcript now holds %d messages", len(self._transcript))
        return result.answer

    def ask(self, user_text: str) -> str:
        with self._exclusive():
            messages = self._record_user(user_text)
            result = self.client.complete_chat(messages, model=self._model, **self._options)
            return self._record_answer(result)

    async def async_ask(self, user_text: str) -> str:
        with self._exclusive():
            messages = self._record_user(user_text)
            result = await self.client.complete_chat(
                messages, model=self._model, **self._options
            )
            return self._record_answer(result)
