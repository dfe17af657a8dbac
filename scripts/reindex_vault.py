"""
CLI: embed every note of the vault and report how it went.

Example:
    python -m scripts.reindex_vault --vault ~/Notes
"""

from __future__ import annotations

import argparse
import asyncio

from vault_search.config import SearchConfig, settings, setup_logging
from vault_search.embeddings.client import EmbeddingsClient
from vault_search.indexing.vault import VaultDocumentSource
from vault_search.notify import ConsoleNotifier
from vault_search.search.pipeline import SemanticIndex


async def run(vault_dir: str, client: EmbeddingsClient | None = None) -> None:
    config = SearchConfig.from_settings()
    client = client or EmbeddingsClient.from_config(config, notifier=ConsoleNotifier())
    index = SemanticIndex(client, config=config)

    summary = await index.rebuild_from_source(VaultDocumentSource(vault_dir), progress=True)
    print(
        f"Indexed {summary.indexed_notes} notes "
        f"({summary.failed_notes} without embedding) in {summary.elapsed_sec:.2f}s"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Embed every markdown note in a vault.")
    parser.add_argument("--vault", default=settings.vault_dir, help="Vault directory")
    args = parser.parse_args()

    setup_logging()
    asyncio.run(run(args.vault))


if __name__ == "__main__":
    main()
