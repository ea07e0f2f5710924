"""Endpoint families exposed by an Azure OpenAI resource."""

from __future__ import annotations

from multiturn_toolkit.llm._providers._base import BaseProvider
from multiturn_toolkit.llm._providers._chat_completions import ChatCompletionsProvider
from multiturn_toolkit.llm._providers._responses import ResponsesProvider

__all__ = ["BaseProvider", "ChatCompletionsProvider", "ResponsesProvider"]
