"""Server-owned conversation: each call names the previous response."""

from __future__ import annotations

import logging
from typing import Any

from multiturn_toolkit.llm._types import TurnResult
from multiturn_toolkit.sessions._base import DEFAULT_SYSTEM_PROMPT, BaseSession

logger = logging.getLogger(__name__)


class ChainedSession(BaseSession):
    """Multi-turn chat over the Responses API.

    Only the id of the last successful exchange is kept.  Instructions go out
    until the first call succeeds, and never again afterwards.  Nothing is
    recorded on failure, so the next call continues from the last good
    exchange.
    """

    kind = "chained"

    def __init__(
        self,
        client: Any,
        instructions: str | None = DEFAULT_SYSTEM_PROMPT,
        *,
        model: str | None = None,
        **request_options: Any,
    ) -> None:
        super().__init__(client)
        self._instructions = instructions
        self._model = model
        self._options = request_options
        self._last_reference: str | None = None
        self._first_turn_done = False

    @property
    def last_reference(self) -> str | None:
        return self._last_reference

    @property
    def first_turn_done(self) -> bool:
        return self._first_turn_done

    def _request(self, system_instructions: str | None) -> dict[str, Any]:
        request: dict[str, Any] = {"model": self._model, **self._options}
        if not self._first_turn_done:
            instructions = (
                system_instructions if system_instructions is not None else self._instructions
            )
            if instructions:
                request["instructions"] = instructions
        if self._last_reference is not None:
            request["previous_reference"] = self._last_reference
        return request

    def _commit(self, result: TurnResult) -> str:
        self._last_reference = result.reference
        self._first_turn_done = True
        self.last_result = result
        logger.debug("Chained session now at %s", result.reference)
        return result.answer

    def ask(self, user_text: str, system_instructions: str | None = None) -> str:
        with self._exclusive():
            result = self.client.complete_chained(
                user_text, **self._request(system_instructions)
            )
            return self._commit(result)

    async def async_ask(self, user_text: str, system_instructions: str | None = None) -> str:
        with self._exclusive():
            result = await self.client.complete_chained(
                user_text, **self._request(system_instructions)
            )
            return self._commit(result)
