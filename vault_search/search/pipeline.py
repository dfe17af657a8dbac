"""
Semantic search over vault notes: embed every note, rank notes against a query.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Iterable, List

from tqdm import tqdm

from vault_search.config import SearchConfig
from vault_search.embeddings.client import EmbeddingsClient
from vault_search.indexing.vault import DocumentSource
from vault_search.vector_store.base import Document, SearchResult, VectorStore
from vault_search.vector_store.memory_store import InMemoryVectorStore

logger = logging.getLogger(__name__)


@dataclass
class ReindexSummary:
    indexed_notes: int
    failed_notes: int
    elapsed_sec: float


class SemanticIndex:
    """
    Id -> embedding map for the notes of one vault.

    The index starts empty and is populated by ``rebuild_all``. Rebuilds are
    serialized; ``search`` takes no lock and may see a rebuild in progress.
    """

    def __init__(
        self,
        embeddings_client: EmbeddingsClient,
        config: SearchConfig | None = None,
        vector_store: VectorStore | None = None,
        logger_: logging.Logger | None = None,
    ) -> None:
        self.embeddings_client = embeddings_client
        self.config = config or SearchConfig(embedding_model=embeddings_client.model)
        self.vector_store = vector_store if vector_store is not None else InMemoryVectorStore()
        self.logger = logger_ or logger
        self._rebuild_lock = asyncio.Lock()
        self._populated = False

    @property
    def is_populated(self) -> bool:
        return self._populated

    def __len__(self) -> int:
        return len(self.vector_store)

    # --- Public API ---
    async def rebuild_all(self, documents: Iterable[Document], progress: bool = False) -> ReindexSummary:
        """Embed every document in the order given and store it under its id."""
        async with self._rebuild_lock:
            started = time.time()
            docs = list(documents)
            failed = 0

            for doc in tqdm(docs, desc="Embedding notes", unit="notes", disable=not progress):
                result = await self.embeddings_client.produce_embedding(doc.text)
                if not result.ok:
                    failed += 1
                # Failed notes stay in the index with an empty vector and score 0.
                self.vector_store.upsert(doc.id, result.vector)

            self._populated = True
            elapsed = time.time() - started
            self.logger.info(
                "Rebuild completed",
                extra={
                    "notes": len(docs),
                    "failed": failed,
                    "index_size": len(self.vector_store),
                    "elapsed_sec": round(elapsed, 2),
                },
            )
            return ReindexSummary(indexed_notes=len(docs), failed_notes=failed, elapsed_sec=elapsed)

    async def rebuild_from_source(self, source: DocumentSource, progress: bool = False) -> ReindexSummary:
        return await self.rebuild_all(source.load_documents(), progress=progress)

    async def search(self, query_text: str, limit: int | None = None) -> List[SearchResult]:
        """Top `limit` notes by descending cosine similarity to the query text."""
        limit = self.config.max_number_of_notes if limit is None else limit
        if len(self.vector_store) == 0:
            return []

        query_vector = await self.embeddings_client.embed_text(query_text)
        results = self.vector_store.search(query_vector, top_k=limit)
        self.logger.info(
            "Search completed",
            extra={
                "limit": limit,
                "returned": len(results),
                "top_score": round(results[0].score, 3) if results else None,
            },
        )
        return results


def format_results(results: Iterable[SearchResult]) -> str:
    return "\n".join(f"{result.id} (score: {result.score:.2f})" for result in results)


__all__ = ["SemanticIndex", "ReindexSummary", "format_results"]
