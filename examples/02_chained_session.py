"""02 — Chained session (Responses API).

The server owns the conversation: each call sends one new input plus the id
of the previous response.  Instructions only go out on the first turn.
"""

from multiturn_toolkit import AzureOpenAIConfig, ChainedSession, CompletionClient, RetryConfig

client = CompletionClient(AzureOpenAIConfig.from_env(), retry=RetryConfig(max_retries=2))
session = ChainedSession(client, instructions="You are a friendly science tutor.")

print("Assistant:", session.ask("My name is Alice. What's a fun fact about space?"))
print(f"  (response id: {session.last_reference})")

print("\nAssistant:", session.ask("Can you remind me of my name?"))
print(f"  (response id: {session.last_reference})")

if session.last_result is not None:
    usage = session.last_result.usage
    print(f"\nTokens — in: {usage.input_tokens}, out: {usage.output_tokens}")
