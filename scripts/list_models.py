"""
CLI: list models available on the Ollama server and probe the chat model.

Example:
    python -m scripts.list_models
"""

from __future__ import annotations

import argparse
import asyncio

from vault_search.config import setup_logging
from vault_search.llm.client import LLMClient
from vault_search.notify import ConsoleNotifier


async def run(chat_model: str | None) -> None:
    client = LLMClient(model=chat_model, notifier=ConsoleNotifier())
    models = await client.list_models()
    for name in models:
        print(name)
    await client.check_chat_model(models)


def main() -> None:
    parser = argparse.ArgumentParser(description="List Ollama models and probe the chat model.")
    parser.add_argument("--chat-model", default=None, help="Chat model to probe (defaults to CHAT_MODEL)")
    args = parser.parse_args()

    setup_logging()
    asyncio.run(run(args.chat_model))


if __name__ == "__main__":
    main()
