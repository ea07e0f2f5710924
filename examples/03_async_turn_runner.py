"""03 — Turn runner with the async client.

Drives a fixed prompt list through a session, printing each turn as it
finishes and stopping at the first failed turn.
"""

import asyncio

from multiturn_toolkit import (
    AsyncCompletionClient,
    AzureOpenAIConfig,
    Err,
    TranscriptSession,
    TurnEvent,
    TurnRunner,
)


def on_event(event: TurnEvent) -> None:
    if event.type == "turn_end":
        print(f"[{event.turn}] {event.prompt}\n    -> {event.answer}\n")
    elif event.type == "error":
        print(f"[{event.turn}] failed: {event.error}")


async def main():
    client = AsyncCompletionClient(AzureOpenAIConfig.from_env())
    session = TranscriptSession(client)
    runner = TurnRunner(
        session,
        [
            "Name one planet in our solar system.",
            "How far is it from the Sun?",
            "Repeat the planet's name only.",
        ],
        on_event=on_event,
    )
    try:
        report = await runner.async_run()
    finally:
        await client.aclose()

    for record in report.turns:
        status = "error" if isinstance(record.outcome, Err) else "ok"
        print(f"turn {record.turn}: {status}")
    if report.skipped:
        print(f"not sent: {list(report.skipped)}")


if __name__ == "__main__":
    asyncio.run(main())
