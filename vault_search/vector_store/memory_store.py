"""
In-memory VectorStore implementation.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from vault_search.vector_store.base import SearchResult, VectorStore
from vault_search.vector_store.similarity import cosine_similarity

logger = logging.getLogger(__name__)


class InMemoryVectorStore(VectorStore):
    """Plain id -> vector map scored by cosine similarity on every query."""

    def __init__(self) -> None:
        self._vectors: Dict[str, List[float]] = {}

    def __len__(self) -> int:
        return len(self._vectors)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._vectors

    def ids(self) -> List[str]:
        return list(self._vectors)

    def get(self, doc_id: str) -> List[float] | None:
        return self._vectors.get(doc_id)

    def clear(self) -> None:
        self._vectors.clear()
        logger.info("In-memory vector store cleared")

    def upsert(self, doc_id: str, vector: Sequence[float]) -> None:
        # Overwriting keeps the key's first insertion position, which the
        # stable sort in search() uses as the tie-break.
        self._vectors[doc_id] = list(vector)

    def search(self, query_vector: Sequence[float], top_k: int) -> List[SearchResult]:
        if top_k <= 0 or not self._vectors:
            return []

        query = list(query_vector)
        results = [
            SearchResult(id=doc_id, score=cosine_similarity(query, vector))
            for doc_id, vector in self._vectors.items()
        ]
        results.sort(key=lambda r: r.score, reverse=True)
        return results[:top_k]


__all__ = ["InMemoryVectorStore"]
