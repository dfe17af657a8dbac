import json

import httpx
import pytest

from vault_search.embeddings.client import EmbeddingsClient
from vault_search.notify import RecordingNotifier

OLLAMA_URL = "http://ollama.test"


def embedding_handler(vectors):
    """Answer /api/embeddings from a prompt -> vector map; unknown prompts get a 500."""

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        vector = vectors.get(body["prompt"])
        if vector is None:
            return httpx.Response(500, json={"error": "model failed"})
        return httpx.Response(200, json={"embedding": vector})

    return handler


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def make_embeddings_client(notifier):
    def factory(vectors=None, handler=None, model="nomic-embed-text"):
        transport = httpx.MockTransport(handler or embedding_handler(vectors or {}))
        return EmbeddingsClient(
            model=model,
            base_url=OLLAMA_URL,
            notifier=notifier,
            client=httpx.AsyncClient(transport=transport),
        )

    return factory
