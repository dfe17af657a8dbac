import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from vault_search import main
from vault_search.api import routes
from vault_search.config import SearchConfig, settings
from vault_search.indexing.vault import VaultDocumentSource
from vault_search.search.pipeline import SemanticIndex

VECTORS = {
    "# Gardening\nTomatoes and basil": [1.0, 0.0],
    "# Finance\nQuarterly budget": [0.0, 1.0],
    "plants": [0.9, 0.1],
}


@pytest.fixture
def vault(tmp_path):
    (tmp_path / "Gardening.md").write_text("# Gardening\nTomatoes and basil", encoding="utf-8")
    (tmp_path / "Finance.md").write_text("# Finance\nQuarterly budget", encoding="utf-8")
    return tmp_path


@pytest.fixture
def client(make_embeddings_client, notifier, vault, monkeypatch):
    monkeypatch.setattr(settings, "admin_token", SecretStr("s3cret"))
    embeddings = make_embeddings_client(vectors=VECTORS)
    index = SemanticIndex(embeddings, config=SearchConfig(embedding_model=embeddings.model, max_number_of_notes=5))

    main.app.dependency_overrides[routes.get_index] = lambda: index
    main.app.dependency_overrides[routes.get_notifier] = lambda: notifier
    main.app.dependency_overrides[routes.get_document_source] = lambda: VaultDocumentSource(vault)
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_search_before_reindex_is_empty(client):
    response = client.post("/api/v1/search", json={"query": "plants"})
    assert response.status_code == 200
    assert response.json() == {"results": [], "notices": []}


def test_reindex_then_search(client):
    response = client.post("/admin/reindex", json={"mode": "full"}, headers={"X-Admin-Token": "s3cret"})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "completed"
    assert body["indexed_notes"] == 2
    assert body["failed_notes"] == 0

    response = client.post("/api/v1/search", json={"query": "plants", "limit": 1})
    assert response.status_code == 200
    results = response.json()["results"]
    assert len(results) == 1
    assert results[0]["id"] == "Gardening.md"


def test_failed_query_embedding_reports_notice(client):
    client.post("/admin/reindex", json={}, headers={"X-Admin-Token": "s3cret"})

    body = client.post("/api/v1/search", json={"query": "unknown"}).json()

    assert [hit["score"] for hit in body["results"]] == [0.0, 0.0]
    assert len(body["notices"]) == 1


def test_reindex_requires_token(client):
    response = client.post("/admin/reindex", json={}, headers={"X-Admin-Token": "wrong"})
    assert response.status_code == 403


def test_reindex_without_configured_token(client, monkeypatch):
    monkeypatch.setattr(settings, "admin_token", None)
    response = client.post("/admin/reindex", json={})
    assert response.status_code == 500


@pytest.mark.parametrize("limit", [0, -1])
def test_search_rejects_non_positive_limit(client, limit):
    response = client.post("/api/v1/search", json={"query": "plants", "limit": limit})
    assert response.status_code == 422
