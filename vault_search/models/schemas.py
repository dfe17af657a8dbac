from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


# Admin
class ReindexRequest(BaseModel):
    """Request to re-embed every note of the vault."""

    mode: Literal["full"] = Field(default="full", description="Only full rebuilds are supported")


class ReindexResponse(BaseModel):
    status: Literal["completed"] = Field(default="completed")
    indexed_notes: int = Field(..., ge=0, description="Notes read from the vault")
    failed_notes: int = Field(0, ge=0, description="Notes stored without an embedding")
    elapsed_sec: float | None = Field(None, ge=0)
    notices: List[str] = Field(default_factory=list)


# Search
class SearchRequest(BaseModel):
    query: str = Field(..., description="Text to search the vault for")
    limit: int | None = Field(
        default=None,
        gt=0,
        description="Override the configured number of notes to return",
    )


class SearchHit(BaseModel):
    id: str
    score: float


class SearchResponse(BaseModel):
    results: List[SearchHit]
    notices: List[str] = Field(default_factory=list)


class ModelsResponse(BaseModel):
    models: List[str]
    notices: List[str] = Field(default_factory=list)


__all__ = [
    "ReindexRequest",
    "ReindexResponse",
    "SearchRequest",
    "SearchHit",
    "SearchResponse",
    "ModelsResponse",
]
