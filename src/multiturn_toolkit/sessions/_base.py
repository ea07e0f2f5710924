"""Base session type shared by both continuity models."""

from __future__ import annotations

import contextlib
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from multiturn_toolkit.llm._types import TurnResult

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful AI assistant. Please limit your responses to 3 sentences."
)


class BaseSession(ABC):
    """Abstract base class for a stateful multi-turn conversation.

    A session accepts one ``ask`` at a time: every turn depends on the state
    left by the previous one.
    """

    kind: str = ""

    def __init__(self, client: Any) -> None:
        self.client = client
        self.last_result: TurnResult | None = None
        self._lock = threading.Lock()

    @contextlib.contextmanager
    def _exclusive(self) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            raise RuntimeError(f"{type(self).__name__} already has an ask() in flight")
        try:
            yield
        finally:
            self._lock.release()

    @abstractmethod
    def ask(self, user_text: str) -> str:
        """Send one user turn and return the assistant's answer."""
        ...

    @abstractmethod
    async def async_ask(self, user_text: str) -> str:
        """Async version of :meth:`ask`; requires an async completion client."""
        ...
