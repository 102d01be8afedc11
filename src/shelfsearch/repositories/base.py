"""Generic repository — Query primitives shared by every document type.

``Repository[T]`` turns structured query intents into engine queries, runs
them with offset/limit pagination and normalizes the response. Every method
returns a ``(data, message)`` pair instead of raising: on failure ``data`` is
an empty list (or ``None`` for single-document calls) and ``message`` carries
the engine's error; on success ``message`` is empty.

Engine hits keep the document identifier outside the document body, so each
read copies the hit id back onto the parsed document.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from shelfsearch.engine.base import SearchEngine, SearchResult
from shelfsearch.models.document import Auditable
from shelfsearch.query import dsl
from shelfsearch.query.dsl import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, Query

logger = logging.getLogger(__name__)

DocT = TypeVar("DocT", bound=Auditable)

NO_RESPONSE = "No response received from the search engine."
EMPTY_ID = "Document id must not be empty."


def _now() -> datetime:
    return datetime.now(UTC)


class Repository(Generic[DocT]):
    """Query builder and CRUD access for one document type.

    The repository keeps no state besides the shared engine handle and the
    document type, so a single instance can serve concurrent callers.

    Args:
        engine: Shared search engine client.
        document_type: Model used to parse hit bodies.
    """

    def __init__(self, engine: SearchEngine, document_type: type[DocT]) -> None:
        self._engine = engine
        self._document_type = document_type

    # ── Helpers ──────────────────────────────────────────────────────────

    def _parse(self, doc_id: str, source: dict[str, Any]) -> DocT:
        document = self._document_type.model_validate(source)
        document.id = doc_id
        return document

    async def _search(
        self,
        index: str,
        query: Query,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> tuple[list[DocT], str]:
        """Run ``query`` and return the requested page with ids restored."""
        result: SearchResult | None = await self._engine.search(
            index=index,
            query=query,
            size=page_size,
            from_=dsl.page_offset(page_size, page),
        )
        if result is None:
            return [], NO_RESPONSE
        if not result.is_valid:
            return [], result.error or NO_RESPONSE

        try:
            documents = [self._parse(hit.id, hit.source) for hit in result.hits]
        except ValidationError as e:
            logger.warning("Unreadable document in '%s': %s", index, e)
            return [], str(e)
        return documents, ""

    # ── Structured queries ───────────────────────────────────────────────

    async def match_all(
        self, index: str, page_size: int = DEFAULT_PAGE_SIZE, page: int = DEFAULT_PAGE
    ) -> tuple[list[DocT], str]:
        """Every document in ``index``, one page at a time."""
        return await self._search(index, dsl.match_all(), page_size, page)

    async def get(self, doc_id: str, index: str) -> tuple[DocT | None, str]:
        """Point lookup by identifier.

        A missing document and a failed lookup both return ``None``; the
        message is only diagnostic.
        """
        if not doc_id or not doc_id.strip():
            return None, EMPTY_ID

        result = await self._engine.get(index=index, doc_id=doc_id)
        if result is None:
            return None, NO_RESPONSE
        if not result.is_valid or result.source is None:
            return None, result.error or f"Document '{doc_id}' not found."

        try:
            return self._parse(result.id or doc_id, result.source), ""
        except ValidationError as e:
            logger.warning("Unreadable document '%s' in '%s': %s", doc_id, index, e)
            return None, str(e)

    async def term(
        self,
        index: str,
        field: str,
        value: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> tuple[list[DocT], str]:
        """Exact, case-insensitive match. Use on categorical fields, not free text."""
        return await self._search(index, dsl.term(field, value), page_size, page)

    async def terms(
        self,
        index: str,
        field: str,
        values: Sequence[str],
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> tuple[list[DocT], str]:
        """Exact match against any of ``values``."""
        return await self._search(index, dsl.terms(field, list(values)), page_size, page)

    async def prefix(
        self,
        index: str,
        field: str,
        value: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> tuple[list[DocT], str]:
        return await self._search(index, dsl.prefix(field, value), page_size, page)

    async def date_range(
        self,
        index: str,
        field: str,
        start: datetime,
        end: datetime,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> tuple[list[DocT], str]:
        """Documents with ``start <= field < end``."""
        return await self._search(index, dsl.date_range(field, start, end), page_size, page)

    async def number_range(
        self,
        index: str,
        field: str,
        start: float,
        end: float,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> tuple[list[DocT], str]:
        """Documents with ``start <= field <= end``."""
        return await self._search(index, dsl.number_range(field, start, end), page_size, page)

    async def wildcard(
        self,
        index: str,
        field: str,
        pattern: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> tuple[list[DocT], str]:
        return await self._search(index, dsl.wildcard(field, pattern), page_size, page)

    async def fuzzy(
        self,
        index: str,
        field: str,
        value: str,
        max_edits: int,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> tuple[list[DocT], str]:
        return await self._search(index, dsl.fuzzy(field, value, max_edits), page_size, page)

    # ── Full-text queries ────────────────────────────────────────────────

    async def full_text_match(
        self,
        index: str,
        field: str,
        value: str,
        max_edits: int,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> tuple[list[DocT], str]:
        """Analyzed match; documents matching any token qualify, more tokens rank higher."""
        return await self._search(index, dsl.match(field, value, max_edits), page_size, page)

    # ── Compound queries ─────────────────────────────────────────────────

    async def compound(
        self,
        index: str,
        must: Sequence[tuple[str, str]] = (),
        must_not: Sequence[tuple[str, float]] = (),
        should: Sequence[tuple[str, datetime]] = (),
        filter: Sequence[tuple[str, str]] = (),
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> tuple[list[DocT], str]:
        """Boolean query built from field/value pairs.

        - ``must``: exact term on the keyword form, scored.
        - ``must_not``: excludes documents with ``field <= value``.
        - ``should``: ``field >= value`` boosts the score but filters nothing.
        - ``filter``: exact term on the field as mapped, unscored.
        """
        query = dsl.bool_query(
            must=[dsl.term(field, value, case_insensitive=False) for field, value in must],
            must_not=[dsl.number_range(field, end=value) for field, value in must_not],
            should=[dsl.date_range(field, start=value) for field, value in should],
            filter=[dsl.raw_term(field, value) for field, value in filter],
        )
        return await self._search(index, query, page_size, page)

    # ── Writes ───────────────────────────────────────────────────────────

    async def index(self, entity: DocT, index: str, actor: int) -> tuple[DocT | None, str]:
        """Insert ``entity``, stamping creation audit fields.

        The engine assigns an id unless ``entity.id`` is already set; either
        way the stored id is written back onto ``entity``.
        """
        entity.created_at = _now()
        entity.created_by = actor

        result = await self._engine.index_document(index=index, document=entity.to_source(), doc_id=entity.id)
        if result is None:
            return None, NO_RESPONSE
        if not result.is_valid:
            return None, result.error or NO_RESPONSE

        entity.id = result.id
        logger.info("Indexed document %s into '%s'", entity.id, index)
        return entity, ""

    async def update(self, entity: DocT, index: str, actor: int) -> tuple[DocT | None, str]:
        """Merge ``entity`` into the stored document with the same id.

        Only fields set on ``entity`` are sent, so creation stamps already in
        the index survive. Concurrent updates to one id are last-write-wins.
        """
        if not entity.id:
            return None, EMPTY_ID

        entity.updated_at = _now()
        entity.updated_by = actor

        result = await self._engine.update_document(index=index, doc_id=entity.id, partial=entity.to_partial_source())
        if result is None:
            return None, NO_RESPONSE
        if not result.is_valid:
            return None, result.error or NO_RESPONSE

        logger.info("Updated document %s in '%s'", entity.id, index)
        return entity, ""

    async def delete(self, doc_id: str, index: str) -> tuple[bool, str]:
        """Permanently remove a document."""
        if not doc_id or not doc_id.strip():
            return False, EMPTY_ID

        result = await self._engine.delete_document(index=index, doc_id=doc_id)
        if result is None:
            return False, NO_RESPONSE
        if not result.is_valid:
            return False, result.error or NO_RESPONSE

        logger.info("Deleted document %s from '%s'", doc_id, index)
        return True, ""

    async def soft_delete(self, doc_id: str, index: str, actor: int) -> tuple[bool, str]:
        """Flag a document inactive, keeping it in the index."""
        if not doc_id or not doc_id.strip():
            return False, EMPTY_ID

        partial = {"is_active": False, "updated_at": _now().isoformat(), "updated_by": actor}
        result = await self._engine.update_document(index=index, doc_id=doc_id, partial=partial)
        if result is None:
            return False, NO_RESPONSE
        if not result.is_valid:
            return False, result.error or NO_RESPONSE

        logger.info("Deactivated document %s in '%s'", doc_id, index)
        return True, ""
