"""Console demo — run a short conversation against an Azure OpenAI deployment.

Set ``AZURE_OPENAI_API_BASE`` (e.g. ``https://RESOURCE.openai.azure.com/openai/v1/``)
and ``AZURE_OPENAI_API_DEPLOY``, log in with ``az login``, then::

    python -m multiturn_toolkit --mode chat
    python -m multiturn_toolkit --mode responses "What is Python?" "Why is it popular?"
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from collections.abc import Sequence

from multiturn_toolkit.llm import (
    AsyncCompletionClient,
    AuthError,
    AzureOpenAIConfig,
    CompletionClient,
    ConfigError,
    ResponseShapeError,
    RetryConfig,
    ToolkitError,
)
from multiturn_toolkit.llm._providers import ChatCompletionsProvider, ResponsesProvider
from multiturn_toolkit.sessions import (
    DEFAULT_SYSTEM_PROMPT,
    BaseSession,
    ChainedSession,
    RunReport,
    TranscriptSession,
    TurnEvent,
    TurnRunner,
)

logger = logging.getLogger(__name__)

DEFAULT_PROMPTS = (
    "What is Python?",
    "Name one thing it is commonly used for.",
    "Summarize your previous two answers in one sentence.",
)

RULE = "─" * 50

API_NAMES = {
    "chat": ChatCompletionsProvider.api_name,
    "responses": ResponsesProvider.api_name,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multiturn-demo",
        description="Carry on a multi-turn conversation with an Azure OpenAI deployment.",
    )
    parser.add_argument("prompts", nargs="*", help="user prompts, sent in order")
    parser.add_argument(
        "--mode",
        choices=sorted(API_NAMES),
        default="chat",
        help="chat replays the transcript; responses chains on the previous response id",
    )
    parser.add_argument("--system", default=DEFAULT_SYSTEM_PROMPT, help="system instructions")
    parser.add_argument("--max-tokens", type=int, default=None, help="chat-mode output limit")
    parser.add_argument("--retries", type=int, default=0, help="transport retries per call")
    parser.add_argument(
        "--async", dest="use_async", action="store_true", help="use the httpx transport"
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def _configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _print_error(error: ToolkitError) -> None:
    print(f"Error: {error}")
    if isinstance(error, AuthError):
        print(f"\nError: {error.hint}")
    elif isinstance(error, ResponseShapeError):
        print("Unexpected response structure. Full response:")
        print(error.raw_json())


def _print_event(event: TurnEvent) -> None:
    if event.type == "turn_start":
        print(f"[{event.turn}] You: {event.prompt}")
    elif event.type == "turn_end":
        print(RULE)
        print(event.answer)
        print(RULE)
        print()
    elif event.type == "error" and event.error is not None:
        _print_error(event.error)


def build_session(mode: str, client: object, system: str) -> BaseSession:
    if mode == "responses":
        return ChainedSession(client, instructions=system)
    return TranscriptSession(client, system=system)


async def _run_async(runner: TurnRunner, client: AsyncCompletionClient) -> RunReport:
    try:
        return await runner.async_run()
    finally:
        await client.aclose()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = AzureOpenAIConfig.from_env()
        if args.max_tokens is not None:
            config = dataclasses.replace(config, max_tokens=args.max_tokens)
    except ConfigError as exc:
        print(f"Error: Environment variables not set properly! {exc}")
        return 2

    retry = RetryConfig(max_retries=args.retries) if args.retries > 0 else None
    client_cls = AsyncCompletionClient if args.use_async else CompletionClient
    client = client_cls(config, retry=retry)
    session = build_session(args.mode, client, args.system)
    runner = TurnRunner(session, args.prompts or DEFAULT_PROMPTS, on_event=_print_event)

    print(f"Sending request to Azure OpenAI ({API_NAMES[args.mode]})...\n")
    report = asyncio.run(_run_async(runner, client)) if args.use_async else runner.run()

    if report.skipped:
        logger.warning("%d prompt(s) not sent after the failure", len(report.skipped))
    return 0 if report.completed else 1


if __name__ == "__main__":
    sys.exit(main())
