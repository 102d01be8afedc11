"""Shared service behaviour — Validation, DTO mapping and envelope wrapping.

Services sit between the API and the repositories. They reject empty input
before any engine call, map documents to DTOs and wrap every outcome in a
``Result``. Nothing below this layer raises for engine failures, and nothing
here raises either.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel

from shelfsearch.config.settings import AuditSettings
from shelfsearch.models.document import AuditedDocument
from shelfsearch.models.result import Result
from shelfsearch.repositories.base import Repository

logger = logging.getLogger(__name__)

DocT = TypeVar("DocT", bound=AuditedDocument)
DtoT = TypeVar("DtoT", bound=BaseModel)

EMPTY_ID_MESSAGE = "Id must not be empty."
EMPTY_MODEL_MESSAGE = "Model must not be empty."
EMPTY_VALUE_MESSAGE = "Search value must not be empty."


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class EntityService(Generic[DocT, DtoT]):
    """CRUD operations every entity service exposes.

    Args:
        repository: Repository for the entity's document type.
        index: Index the entity lives in.
        to_dto: Maps a stored document to its transport record.
        audit: Identity recorded on writes when the caller passes none.
    """

    def __init__(
        self,
        repository: Repository[DocT],
        index: str,
        to_dto: Callable[[DocT], DtoT],
        audit: AuditSettings | None = None,
    ) -> None:
        self._repository = repository
        self._index = index
        self._to_dto = to_dto
        self._audit = audit or AuditSettings()

    # ── Envelope helpers ─────────────────────────────────────────────────

    def _many(self, documents: Sequence[DocT], message: str) -> Result[list[DtoT]]:
        if message:
            logger.warning("Query on '%s' returned no data: %s", self._index, message)
            return Result.no_content(f"Could not retrieve data. Message: {message}")
        return Result.ok([self._to_dto(doc) for doc in documents])

    def _one(self, document: DocT | None, message: str) -> Result[DtoT]:
        if document is None:
            return Result.no_content(f"Could not retrieve data. Message: {message}")
        return Result.ok(self._to_dto(document))

    # ── Reads ────────────────────────────────────────────────────────────

    async def get_all(self, page_size: int = 10, page: int = 1) -> Result[list[DtoT]]:
        documents, message = await self._repository.match_all(self._index, page_size, page)
        return self._many(documents, message)

    async def get_by_id(self, doc_id: str | None) -> Result[DtoT]:
        if is_blank(doc_id):
            return Result.bad_request(EMPTY_ID_MESSAGE)

        document, message = await self._repository.get(doc_id, self._index)
        return self._one(document, message)

    # ── Writes ───────────────────────────────────────────────────────────

    async def _insert(self, entity: DocT | None, actor: int | None) -> Result[DtoT]:
        if entity is None:
            return Result.bad_request(EMPTY_MODEL_MESSAGE)

        stored, message = await self._repository.index(entity, self._index, actor or self._audit.created_by)
        if stored is None:
            return Result.bad_request(f"Indexing failed. Message: {message}")
        return Result.ok(self._to_dto(stored))

    async def _update(self, entity: DocT | None, actor: int | None) -> Result[DtoT]:
        if entity is None:
            return Result.bad_request(EMPTY_MODEL_MESSAGE)
        if is_blank(entity.id):
            return Result.bad_request(EMPTY_ID_MESSAGE)

        stored, message = await self._repository.update(entity, self._index, actor or self._audit.updated_by)
        if stored is None:
            return Result.bad_request(f"Update failed. Message: {message}")
        return Result.ok(self._to_dto(stored))

    async def delete(self, doc_id: str | None) -> Result[bool]:
        """Hard delete: the document is gone from the index."""
        if is_blank(doc_id):
            return Result.bad_request(EMPTY_ID_MESSAGE)

        deleted, message = await self._repository.delete(doc_id, self._index)
        if not deleted:
            return Result.bad_request(f"Delete failed. Message: {message}")
        return Result.ok(True)

    async def deactivate(self, doc_id: str | None, actor: int | None = None) -> Result[bool]:
        """Soft delete: the document stays, flagged ``is_active=False``."""
        if is_blank(doc_id):
            return Result.bad_request(EMPTY_ID_MESSAGE)

        done, message = await self._repository.soft_delete(doc_id, self._index, actor or self._audit.updated_by)
        if not done:
            return Result.bad_request(f"Deactivation failed. Message: {message}")
        return Result.ok(True)
