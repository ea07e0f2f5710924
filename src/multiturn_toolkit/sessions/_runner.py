"""Turn runner — drives a fixed prompt list through one session."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from multiturn_toolkit.llm._exceptions import ResponseShapeError, ToolkitError
from multiturn_toolkit.llm._types import Err, Ok, Outcome
from multiturn_toolkit.sessions._base import BaseSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnEvent:
    """An observable event fired while the runner works through its prompts."""

    type: str  # "turn_start", "turn_end", "error"
    turn: int
    prompt: str
    answer: str = ""
    error: ToolkitError | None = None


@dataclass(frozen=True, slots=True)
class TurnRecord:
    """One attempted turn and how it ended."""

    turn: int
    prompt: str
    outcome: Outcome


@dataclass(frozen=True, slots=True)
class RunReport:
    """The result of a run: every attempted turn plus the prompts never sent."""

    session_kind: str
    turns: tuple[TurnRecord, ...] = ()
    skipped: tuple[str, ...] = ()

    @property
    def error(self) -> ToolkitError | None:
        for record in self.turns:
            if isinstance(record.outcome, Err):
                return record.outcome.error
        return None

    @property
    def completed(self) -> bool:
        return self.error is None and not self.skipped

    @property
    def answers(self) -> tuple[str, ...]:
        return tuple(r.outcome.answer for r in self.turns if isinstance(r.outcome, Ok))


def _attempt(session: BaseSession, prompt: str) -> Outcome:
    try:
        return Ok(session.ask(prompt))
    except ToolkitError as exc:
        return Err(exc)


async def _async_attempt(session: BaseSession, prompt: str) -> Outcome:
    try:
        return Ok(await session.async_ask(prompt))
    except ToolkitError as exc:
        return Err(exc)


class TurnRunner:
    """Sends each prompt in order and stops at the first failed turn.

    Usage::

        runner = TurnRunner(session, ["Hi", "Bye"], on_event=print)
        report = runner.run()
        if report.error:
            ...
    """

    def __init__(
        self,
        session: BaseSession,
        prompts: Sequence[str],
        *,
        on_event: Callable[[TurnEvent], None] | None = None,
    ) -> None:
        self.session = session
        self.prompts = tuple(prompts)
        self.on_event = on_event

    def _fire(
        self,
        event_type: str,
        turn: int,
        prompt: str,
        *,
        answer: str = "",
        error: ToolkitError | None = None,
    ) -> None:
        if self.on_event is not None:
            self.on_event(
                TurnEvent(type=event_type, turn=turn, prompt=prompt, answer=answer, error=error)
            )

    def _settle(self, turn: int, prompt: str, outcome: Outcome) -> TurnRecord:
        if isinstance(outcome, Ok):
            logger.info("Turn %d of %s session answered", turn, self.session.kind)
            self._fire("turn_end", turn, prompt, answer=outcome.answer)
        else:
            error = outcome.error
            logger.error(
                "Turn %d of %s session failed with %s: %s",
                turn,
                self.session.kind,
                type(error).__name__,
                error,
            )
            if isinstance(error, ResponseShapeError):
                logger.error("Raw payload:\n%s", error.raw_json())
            self._fire("error", turn, prompt, error=error)
        return TurnRecord(turn=turn, prompt=prompt, outcome=outcome)

    def _report(self, records: list[TurnRecord]) -> RunReport:
        return RunReport(
            session_kind=self.session.kind,
            turns=tuple(records),
            skipped=self.prompts[len(records) :],
        )

    def run(self) -> RunReport:
        """Run every prompt synchronously, halting on the first error."""
        records: list[TurnRecord] = []
        for turn, prompt in enumerate(self.prompts, start=1):
            self._fire("turn_start", turn, prompt)
            record = self._settle(turn, prompt, _attempt(self.session, prompt))
            records.append(record)
            if isinstance(record.outcome, Err):
                break
        return self._report(records)

    async def async_run(self) -> RunReport:
        """Run every prompt with ``async_ask``; each turn awaits the previous one."""
        records: list[TurnRecord] = []
        for turn, prompt in enumerate(self.prompts, start=1):
            self._fire("turn_start", turn, prompt)
            record = self._settle(turn, prompt, await _async_attempt(self.session, prompt))
            records.append(record)
            if isinstance(record.outcome, Err):
                break
        return self._report(records)
