"""
Ollama embeddings client.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

import httpx

from vault_search.config import SearchConfig, settings
from vault_search.notify import LoggingNotifier, Notifier

EMBEDDINGS_PATH = "/api/embeddings"
SERVER_UNREACHABLE_NOTICE = "Failed to fetch from Ollama. Is the server running?"
UNCONFIGURED_NOTICE = "No embedding model configured. Set EMBEDDING_MODEL to an Ollama model name."

logger = logging.getLogger(__name__)


class EmbeddingFailure(str, Enum):
    UNCONFIGURED = "unconfigured"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED_JSON = "malformed_json"
    SHAPE_MISMATCH = "shape_mismatch"


@dataclass
class EmbeddingResult:
    vector: List[float] = field(default_factory=list)
    failure: EmbeddingFailure | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None and bool(self.vector)


def _finite_float(value: Any) -> float | None:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def extract_embedding(payload: Any) -> List[float] | None:
    """Return the `embedding` array of a response body, or None if it is not a non-empty array of finite numbers."""
    if not isinstance(payload, dict):
        return None
    embedding = payload.get("embedding")
    if not isinstance(embedding, list) or not embedding:
        return None
    vector = [_finite_float(v) for v in embedding]
    if any(v is None for v in vector):
        return None
    return vector


class EmbeddingsClient:
    def __init__(
        self,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        notifier: Notifier | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.model = settings.embedding_model if model is None else model
        self.base_url = (base_url or settings.ollama_base_url).rstrip("/")
        self.timeout = settings.ollama_timeout_sec if timeout is None else timeout
        self.notifier = notifier or LoggingNotifier()
        self.client = client

    @classmethod
    def from_config(cls, config: SearchConfig, **kwargs: Any) -> "EmbeddingsClient":
        return cls(model=config.embedding_model, **kwargs)

    async def produce_embedding(self, text: str) -> EmbeddingResult:
        """Request an embedding for `text`; failures come back as a result, never as an exception."""
        if not self.model.strip():
            return self._fail(EmbeddingFailure.UNCONFIGURED, UNCONFIGURED_NOTICE, UNCONFIGURED_NOTICE)

        body = {"model": self.model, "prompt": text}
        try:
            response = await self._post(body)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return self._fail(EmbeddingFailure.TRANSPORT, str(exc) or type(exc).__name__, SERVER_UNREACHABLE_NOTICE)

        if response.is_error:
            return self._fail(
                EmbeddingFailure.HTTP_STATUS,
                f"HTTP {response.status_code}",
                f"Failed to create embedding for the note. {response.text[:200]}",
            )

        try:
            payload = response.json()
        except ValueError:
            return self._fail(
                EmbeddingFailure.MALFORMED_JSON,
                response.text[:200],
                f"Failed to create embedding for the note. {response.text[:200]}",
            )

        vector = extract_embedding(payload)
        if vector is None:
            return self._fail(
                EmbeddingFailure.SHAPE_MISMATCH,
                "response has no non-empty finite numeric 'embedding' array",
                f"Failed to create embedding for the note. {json.dumps(payload)}",
            )
        return EmbeddingResult(vector=vector)

    async def embed_text(self, text: str) -> List[float]:
        result = await self.produce_embedding(text)
        return result.vector

    async def _post(self, body: dict) -> httpx.Response:
        url = f"{self.base_url}{EMBEDDINGS_PATH}"
        # ASCII-escaped JSON so unpaired surrogates in note text still encode.
        content = json.dumps(body).encode("ascii")
        headers = {"Content-Type": "application/json"}
        if self.client is not None:
            return await self.client.post(url, content=content, headers=headers, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(url, content=content, headers=headers)

    def _fail(self, failure: EmbeddingFailure, detail: str, notice: str) -> EmbeddingResult:
        logger.warning(
            "Embedding request failed",
            extra={"failure": failure.value, "detail": detail, "model": self.model},
        )
        self.notifier.notify(notice)
        return EmbeddingResult(vector=[], failure=failure, detail=detail)


__all__ = [
    "EmbeddingsClient",
    "EmbeddingFailure",
    "EmbeddingResult",
    "extract_embedding",
    "EMBEDDINGS_PATH",
    "SERVER_UNREACHABLE_NOTICE",
    "UNCONFIGURED_NOTICE",
]
