"""01 — Transcript-driven session (Chat Completions API).

The client owns the conversation: every turn appends to a local transcript
and the whole transcript is sent again on the next call.
"""

from multiturn_toolkit import AzureOpenAIConfig, CompletionClient, TranscriptSession

client = CompletionClient(AzureOpenAIConfig.from_env())
session = TranscriptSession(client, system="You are a friendly science tutor.")

print("Assistant:", session.ask("My name is Alice. What's a fun fact about space?"))
print("\nAssistant:", session.ask("Can you remind me of my name?"))

print(f"\nTranscript holds {len(session.transcript)} messages:")
for message in session.transcript:
    print(f"  {message.role:>9}: {message.content[:60]}")
