"""
CLI: embed the vault and search it by text query.

The index lives in memory only, so every run re-embeds the whole vault first.

Example:
    python -m scripts.search_query --query "weekly review habits" --top-k 5
"""

from __future__ import annotations

import argparse
import asyncio

from vault_search.config import SearchConfig, settings, setup_logging
from vault_search.embeddings.client import EmbeddingsClient
from vault_search.indexing.vault import VaultDocumentSource
from vault_search.notify import ConsoleNotifier
from vault_search.search.pipeline import SemanticIndex, format_results


async def run(query: str, top_k: int | None, vault_dir: str, client: EmbeddingsClient | None = None) -> None:
    config = SearchConfig.from_settings()
    client = client or EmbeddingsClient.from_config(config, notifier=ConsoleNotifier())
    index = SemanticIndex(client, config=config)

    await index.rebuild_from_source(VaultDocumentSource(vault_dir), progress=True)
    results = await index.search(query, limit=top_k)

    if not results:
        print("No results")
        return
    print("Search results:")
    print(format_results(results))


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("Please enter a valid number greater than 0")
    return number


def main() -> None:
    parser = argparse.ArgumentParser(description="Search vault notes by text query.")
    parser.add_argument("--query", "-q", required=True, help="Query text")
    parser.add_argument("--top-k", type=positive_int, default=None, help="How many notes to return")
    parser.add_argument("--vault", default=settings.vault_dir, help="Vault directory")
    args = parser.parse_args()

    setup_logging()
    asyncio.run(run(args.query, args.top_k, args.vault))


if __name__ == "__main__":
    main()
