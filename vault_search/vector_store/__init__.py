"""
Vector store abstractions and factories.
"""

from vault_search.config import settings
from vault_search.vector_store.memory_store import InMemoryVectorStore

DEFAULT_VECTOR_STORE_BACKEND = settings.vector_store_backend


def get_vector_store(backend: str | None = None):
    """
    Factory to obtain configured VectorStore instance.
    Currently supports only the in-memory backend.
    """
    backend = (backend or DEFAULT_VECTOR_STORE_BACKEND).lower()
    if backend == "memory":
        return InMemoryVectorStore()
    raise ValueError(f"Unsupported vector store backend: {backend}")


__all__ = ["DEFAULT_VECTOR_STORE_BACKEND", "get_vector_store", "InMemoryVectorStore"]
