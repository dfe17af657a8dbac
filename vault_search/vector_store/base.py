"""
Vector store interface and shared types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence


@dataclass
class Document:
    id: str
    text: str


@dataclass
class SearchResult:
    id: str
    score: float


class VectorStore(Protocol):
    def clear(self) -> None:
        ...

    def upsert(self, doc_id: str, vector: Sequence[float]) -> None:
        ...

    def search(self, query_vector: Sequence[float], top_k: int) -> List[SearchResult]:
        ...

    def __len__(self) -> int:
        ...


__all__ = ["Document", "SearchResult", "VectorStore"]
