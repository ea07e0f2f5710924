"""Value types shared by the completion clients and the sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from multiturn_toolkit.llm._exceptions import ToolkitError

type Role = Literal["system", "user", "assistant"]

ROLES: frozenset[str] = frozenset({"system", "user", "assistant"})


@dataclass(frozen=True, slots=True)
class Message:
    """A chat message."""

    role: Role
    content: str

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Unknown role {self.role!r}. Expected one of {sorted(ROLES)}")

    def to_wire(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True, slots=True)
class Usage:
    """Token usage counts."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True, slots=True)
class TurnResult:
    """What one completion call produced.

    ``reference`` is the server-issued id of the exchange and is only set by
    the chained (Responses API) call shape.
    """

    answer: str
    reference: str | None = None
    usage: Usage = field(default_factory=Usage)
    raw: dict[str, object] = field(default_factory=dict)

    def to_message(self) -> Message:
        """Convert this result to an assistant Message for a transcript."""
        return Message(role="assistant", content=self.answer)


# --- Tagged outcome of a single turn ---


@dataclass(frozen=True, slots=True)
class Ok:
    """A turn that produced an answer."""

    answer: str


@dataclass(frozen=True, slots=True)
class Err:
    """A turn that failed with one of the package's errors."""

    error: ToolkitError


type Outcome = Ok | Err
