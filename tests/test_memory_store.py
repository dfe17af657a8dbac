import pytest

from vault_search.vector_store import get_vector_store
from vault_search.vector_store.memory_store import InMemoryVectorStore


@pytest.fixture
def store():
    s = InMemoryVectorStore()
    s.upsert("a.md", [1.0, 0.0])
    s.upsert("b.md", [0.0, 1.0])
    s.upsert("c.md", [0.7, 0.7])
    return s


def test_factory_returns_memory_store():
    assert isinstance(get_vector_store("memory"), InMemoryVectorStore)


def test_factory_rejects_unknown_backend():
    with pytest.raises(ValueError):
        get_vector_store("chroma")


def test_search_sorted_descending(store):
    results = store.search([1.0, 0.1], top_k=3)
    assert [r.id for r in results] == ["a.md", "c.md", "b.md"]
    assert all(results[i].score >= results[i + 1].score for i in range(len(results) - 1))


def test_search_respects_top_k(store):
    assert len(store.search([1.0, 0.0], top_k=2)) == 2
    assert len(store.search([1.0, 0.0], top_k=10)) == 3
    assert store.search([1.0, 0.0], top_k=0) == []


def test_empty_store_returns_nothing():
    assert InMemoryVectorStore().search([1.0], top_k=5) == []


def test_upsert_replaces_existing_vector(store):
    store.upsert("a.md", [0.0, 1.0])
    assert len(store) == 3
    assert store.get("a.md") == [0.0, 1.0]


def test_ties_keep_insertion_order():
    s = InMemoryVectorStore()
    for doc_id in ["first.md", "second.md", "third.md"]:
        s.upsert(doc_id, [1.0, 0.0])
    s.upsert("first.md", [2.0, 0.0])
    assert [r.id for r in s.search([1.0, 0.0], top_k=3)] == ["first.md", "second.md", "third.md"]


def test_clear(store):
    store.clear()
    assert len(store) == 0
    assert "a.md" not in store


def test_non_finite_vector_never_ranks_ahead():
    s = InMemoryVectorStore()
    s.upsert("n.md", [float("nan"), 1.0])
    s.upsert("a.md", [1.0, 0.0])

    results = s.search([1.0, 0.0], top_k=2)

    assert [(r.id, r.score) for r in results] == [("a.md", 1.0), ("n.md", 0.0)]
