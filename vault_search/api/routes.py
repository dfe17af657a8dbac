from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, Header, HTTPException, status

from vault_search.config import SearchConfig, settings
from vault_search.embeddings.client import EmbeddingsClient
from vault_search.indexing.vault import VaultDocumentSource
from vault_search.llm.client import LLMClient
from vault_search.models.schemas import (
    ModelsResponse,
    ReindexRequest,
    ReindexResponse,
    SearchHit,
    SearchRequest,
    SearchResponse,
)
from vault_search.notify import LoggingNotifier, RecordingNotifier
from vault_search.search.pipeline import SemanticIndex
from vault_search.vector_store import get_vector_store

router = APIRouter()
logger = logging.getLogger(__name__)


@lru_cache
def get_notifier() -> RecordingNotifier:
    return RecordingNotifier(forward=LoggingNotifier())


@lru_cache
def get_index() -> SemanticIndex:
    config = SearchConfig.from_settings()
    client = EmbeddingsClient.from_config(config, notifier=get_notifier())
    return SemanticIndex(client, config=config, vector_store=get_vector_store())


def get_document_source() -> VaultDocumentSource:
    return VaultDocumentSource(settings.vault_dir)


def get_llm_client() -> LLMClient:
    return LLMClient(notifier=get_notifier())


def _check_admin_token(x_admin_token: str | None) -> None:
    if not settings.admin_token:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Admin token is not configured",
        )
    if x_admin_token != settings.admin_token.get_secret_value():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")


@router.post("/admin/reindex", response_model=ReindexResponse, summary="Re-embed every note in the vault")
async def admin_reindex(
    reindex_request: ReindexRequest,
    x_admin_token: str | None = Header(default=None, alias="X-Admin-Token"),
    index: SemanticIndex = Depends(get_index),
    source: VaultDocumentSource = Depends(get_document_source),
    notifier: RecordingNotifier = Depends(get_notifier),
) -> ReindexResponse:
    _check_admin_token(x_admin_token)
    logger.info("Admin reindex requested", extra={"mode": reindex_request.mode})

    summary = await index.rebuild_from_source(source)
    response = ReindexResponse(
        status="completed",
        indexed_notes=summary.indexed_notes,
        failed_notes=summary.failed_notes,
        elapsed_sec=round(summary.elapsed_sec, 2),
        notices=notifier.drain(),
    )
    logger.info(
        "Admin reindex completed",
        extra={"indexed_notes": response.indexed_notes, "elapsed_sec": response.elapsed_sec},
    )
    return response


@router.post("/api/v1/search", response_model=SearchResponse, summary="Rank vault notes against a query")
async def search(
    request: SearchRequest,
    index: SemanticIndex = Depends(get_index),
    notifier: RecordingNotifier = Depends(get_notifier),
) -> SearchResponse:
    logger.info("Search request", extra={"len": len(request.query), "limit": request.limit})
    results = await index.search(request.query, limit=request.limit)
    return SearchResponse(
        results=[SearchHit(id=r.id, score=r.score) for r in results],
        notices=notifier.drain(),
    )


@router.get("/api/v1/models", response_model=ModelsResponse, summary="List models available on Ollama")
async def models(
    llm_client: LLMClient = Depends(get_llm_client),
    notifier: RecordingNotifier = Depends(get_notifier),
) -> ModelsResponse:
    names = await llm_client.list_models()
    return ModelsResponse(models=names, notices=notifier.drain())


__all__ = ["router", "get_index", "get_notifier", "get_document_source", "get_llm_client"]
