"""Tests for the value types."""

from __future__ import annotations

import dataclasses

import pytest

from multiturn_toolkit.llm._exceptions import ProviderError
from multiturn_toolkit.llm._types import Err, Message, Ok, TurnResult, Usage


def test_message_is_frozen() -> None:
    msg = Message("user", "Hi")
    with pytest.raises(dataclasses.FrozenInstanceError):
        msg.content = "changed"  # type: ignore[misc]


def test_message_rejects_unknown_role() -> None:
    with pytest.raises(ValueError, match="Unknown role"):
        Message("tool", "42")  # type: ignore[arg-type]


def test_message_to_wire() -> None:
    assert Message("system", "Be brief").to_wire() == {"role": "system", "content": "Be brief"}


def test_turn_result_defaults() -> None:
    result = TurnResult(answer="Hello")
    assert result.reference is None
    assert result.usage == Usage()
    assert result.raw == {}


def test_turn_result_to_message() -> None:
    msg = TurnResult(answer="Hello", reference="resp_1").to_message()
    assert msg == Message("assistant", "Hello")


def test_outcome_variants() -> None:
    error = ProviderError("boom")
    assert Ok("fine").answer == "fine"
    assert Err(error).error is error
    assert Ok("x") != Err(error)
