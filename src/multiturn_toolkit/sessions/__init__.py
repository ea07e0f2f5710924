"""Session drivers for multi-turn conversations."""

from multiturn_toolkit.sessions._base import DEFAULT_SYSTEM_PROMPT, BaseSession
from multiturn_toolkit.sessions._chained import ChainedSession
from multiturn_toolkit.sessions._runner import RunReport, TurnEvent, TurnRecord, TurnRunner
from multiturn_toolkit.sessions._transcript import TranscriptSession

__all__ = [
    "DEFAULT_SYSTEM_PROMPT",
    "BaseSession",
    "ChainedSession",
    "RunReport",
    "TranscriptSession",
    "TurnEvent",
    "TurnRecord",
    "TurnRunner",
]
