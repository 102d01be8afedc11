"""OpenSearch engine client — Async access to an OpenSearch / Elasticsearch-compatible cluster.

Uses ``opensearch-py``'s ``AsyncOpenSearch`` over HTTPS with basic
authentication. The query DSL produced by ``shelfsearch.query.dsl`` is sent
as-is; this module only handles transport and response normalization.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from typing import Any

from shelfsearch.engine.base import (
    EngineHealth,
    GetResult,
    IndexResult,
    SearchEngine,
    SearchHit,
    SearchResult,
    WriteResult,
)
from shelfsearch.engine.exceptions import ConfigurationError, ConnectionError

logger = logging.getLogger(__name__)


class OpenSearchEngine(SearchEngine):
    """Search engine client for OpenSearch (v2+).

    Args:
        hosts: List of node URLs.
        username: Optional HTTP basic-auth username.
        password: Optional HTTP basic-auth password.
        verify_certs: Whether to verify TLS certificates.
        timeout: Connection-level request timeout in seconds.
        **kwargs: Additional keyword arguments forwarded to ``AsyncOpenSearch``.
    """

    def __init__(
        self,
        hosts: list[str] | None = None,
        username: str | None = None,
        password: str | None = None,
        verify_certs: bool = True,
        timeout: int = 30,
        **kwargs: Any,
    ) -> None:
        self._hosts = hosts or ["https://localhost:9200"]
        self._username = username
        self._password = password
        self._verify_certs = verify_certs
        self._timeout = timeout
        self._extra_kwargs = kwargs
        self._client: Any = None

    @property
    def name(self) -> str:
        return "opensearch"

    async def initialize(self) -> None:
        """Create and verify the ``AsyncOpenSearch`` client."""
        try:
            from opensearchpy import AsyncOpenSearch
        except ImportError as e:
            raise ConfigurationError("opensearch-py package is required.  Install with: pip install opensearch-py[async]") from e

        if bool(self._username) != bool(self._password):
            raise ConfigurationError("Basic authentication needs both a username and a password.")

        client_kwargs: dict[str, Any] = {
            "hosts": self._hosts,
            "verify_certs": self._verify_certs,
            "ssl_show_warn": False,
            "timeout": self._timeout,
        }
        if self._username and self._password:
            client_kwargs["http_auth"] = (self._username, self._password)

        client_kwargs.update(self._extra_kwargs)

        try:
            self._client = AsyncOpenSearch(**client_kwargs)
            info = await self._client.info()
            version = info.get("version", {}).get("number", "unknown")
            cluster = info.get("cluster_name", "unknown")
            logger.info("Connected to search cluster: %s (v%s)", cluster, version)
        except Exception as e:
            raise ConnectionError(f"Failed to connect to search engine: {e}") from e

    async def shutdown(self) -> None:
        """Close the client."""
        if self._client:
            await self._client.close()
            self._client = None

    def _require_client(self) -> Any:
        if not self._client:
            raise ConnectionError("Search engine client not initialized.")
        return self._client

    # ── Reads ────────────────────────────────────────────────────────────

    async def search(self, index: str, query: dict[str, Any], size: int, from_: int) -> SearchResult:
        body = {"query": query, "size": size, "from": from_}
        logger.debug("search index=%s body=%s", index, body)
        try:
            client = self._require_client()
            start = time.monotonic()
            response = await client.search(index=index, body=body)
            took_ms = int((time.monotonic() - start) * 1000)
        except Exception as e:
            logger.warning("Search on '%s' failed: %s", index, e)
            return SearchResult.failed(str(e))

        if response is None:
            return SearchResult.failed(f"Empty response from search on '{index}'.")

        hits = response.get("hits", {})
        total = hits.get("total", {})
        return SearchResult(
            total=total.get("value", 0) if isinstance(total, dict) else int(total or 0),
            hits=[
                SearchHit(id=hit["_id"], source=hit.get("_source") or {}, score=hit.get("_score"))
                for hit in hits.get("hits", [])
            ],
            took_ms=took_ms,
        )

    async def get(self, index: str, doc_id: str) -> GetResult:
        try:
            client = self._require_client()
            response = await client.get(index=index, id=doc_id)
        except Exception as e:
            if "NotFoundError" in type(e).__name__:
                return GetResult.failed(f"Document '{doc_id}' not found in '{index}'.")
            logger.warning("Get '%s' from '%s' failed: %s", doc_id, index, e)
            return GetResult.failed(str(e))

        if not response or not response.get("found", False):
            return GetResult.failed(f"Document '{doc_id}' not found in '{index}'.")
        return GetResult(id=response.get("_id", doc_id), source=response.get("_source") or {})

    # ── Writes ───────────────────────────────────────────────────────────

    async def index_document(self, index: str, document: dict[str, Any], doc_id: str | None = None) -> IndexResult:
        try:
            client = self._require_client()
            kwargs: dict[str, Any] = {"index": index, "body": document}
            if doc_id:
                kwargs["id"] = doc_id
            response = await client.index(**kwargs)
        except Exception as e:
            logger.warning("Indexing into '%s' failed: %s", index, e)
            return IndexResult.failed(str(e))

        assigned = (response or {}).get("_id")
        if not assigned:
            return IndexResult.failed(f"Engine did not return an id for the document indexed into '{index}'.")
        return IndexResult(id=assigned)

    async def update_document(self, index: str, doc_id: str, partial: dict[str, Any]) -> WriteResult:
        try:
            client = self._require_client()
            await client.update(index=index, id=doc_id, body={"doc": partial})
        except Exception as e:
            logger.warning("Update of '%s' in '%s' failed: %s", doc_id, index, e)
            return WriteResult.failed(str(e))
        return WriteResult()

    async def delete_document(self, index: str, doc_id: str) -> WriteResult:
        try:
            client = self._require_client()
            await client.delete(index=index, id=doc_id)
        except Exception as e:
            logger.warning("Delete of '%s' from '%s' failed: %s", doc_id, index, e)
            return WriteResult.failed(str(e))
        return WriteResult()

    # ── Health ───────────────────────────────────────────────────────────

    async def health_check(self) -> EngineHealth:
        """Check cluster health."""
        if not self._client:
            return EngineHealth(status="unhealthy", message="Client not initialized")

        try:
            start = time.monotonic()
            health = await self._client.cluster.health()
            latency_ms = int((time.monotonic() - start) * 1000)

            status_map = {"green": "healthy", "yellow": "degraded", "red": "unhealthy"}

            return EngineHealth(
                status=status_map.get(health.get("status", "red"), "unhealthy"),
                latency_ms=latency_ms,
                last_check=datetime.now(UTC).isoformat(),
                message=f"Cluster: {health.get('cluster_name')}, Nodes: {health.get('number_of_nodes')}",
            )
        except Exception as e:
            return EngineHealth(status="unhealthy", message=str(e))
