"""Search engine interface — What the repositories need from an engine client.

Every response model carries an ``is_valid`` flag and, when it is false, the
message of the exception that caused the failure. Implementations must not
let per-request exceptions escape; repositories rely on the flag.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field


class EngineHealth(BaseModel):
    """Health status of the search engine."""

    status: str = Field(description="Health status: healthy, degraded, unhealthy")
    latency_ms: int = Field(default=0, description="Latency of last health check in ms")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")


class SearchHit(BaseModel):
    """One match: the engine identifier travels beside the document body."""

    id: str = Field(description="Engine identifier of the hit")
    source: dict[str, Any] = Field(default_factory=dict, description="Document body, without the identifier")
    score: float | None = Field(default=None, description="Relevance score")


class EngineResponse(BaseModel):
    """Fields shared by every engine response."""

    is_valid: bool = Field(default=True, description="False when the request failed")
    error: str | None = Field(default=None, description="Message of the underlying exception")

    @classmethod
    def failed(cls, error: str) -> Any:
        return cls(is_valid=False, error=error)


class SearchResult(EngineResponse):
    """Response to a search request."""

    total: int = Field(default=0, description="Total number of matching documents")
    hits: list[SearchHit] = Field(default_factory=list, description="Requested page of matches")
    took_ms: int = Field(default=0, description="Engine-side execution time in ms")


class GetResult(EngineResponse):
    """Response to a point lookup."""

    id: str | None = None
    source: dict[str, Any] | None = None


class IndexResult(EngineResponse):
    """Response to an index (create/upsert) request."""

    id: str | None = Field(default=None, description="Identifier assigned or accepted by the engine")


class WriteResult(EngineResponse):
    """Response to an update or delete request."""


class SearchEngine(ABC):
    """Abstract async client for a document search engine.

    One instance is shared by all repositories and may be called
    concurrently; implementations hold no per-request state.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Engine name (e.g., 'opensearch')."""

    @abstractmethod
    async def initialize(self) -> None:
        """Open connections. Called once during application startup."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Close connections. Called during application shutdown."""

    @abstractmethod
    async def search(self, index: str, query: dict[str, Any], size: int, from_: int) -> SearchResult:
        """Run ``query`` against ``index`` and return one page of hits."""

    @abstractmethod
    async def get(self, index: str, doc_id: str) -> GetResult:
        """Fetch a single document by identifier."""

    @abstractmethod
    async def index_document(self, index: str, document: dict[str, Any], doc_id: str | None = None) -> IndexResult:
        """Create or replace a document. The engine assigns an id when ``doc_id`` is None."""

    @abstractmethod
    async def update_document(self, index: str, doc_id: str, partial: dict[str, Any]) -> WriteResult:
        """Merge ``partial`` into the stored document."""

    @abstractmethod
    async def delete_document(self, index: str, doc_id: str) -> WriteResult:
        """Permanently remove a document."""

    @abstractmethod
    async def health_check(self) -> EngineHealth:
        """Report engine health."""
