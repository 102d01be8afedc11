"""Author service."""

from __future__ import annotations

from shelfsearch.config.settings import AuditSettings
from shelfsearch.models.author import Author, AuthorDto, CreateAuthorModel, UpdateAuthorModel
from shelfsearch.models.result import Result
from shelfsearch.repositories.author import AuthorRepository
from shelfsearch.services.base import EMPTY_VALUE_MESSAGE, EntityService, is_blank


class AuthorService(EntityService[Author, AuthorDto]):
    """Author lookups and writes against the ``authors`` index."""

    def __init__(self, repository: AuthorRepository, index: str = "authors", audit: AuditSettings | None = None) -> None:
        super().__init__(repository, index, AuthorDto.from_entity, audit)

    async def get_by_first_name(self, first_name: str | None) -> Result[list[AuthorDto]]:
        if is_blank(first_name):
            return Result.bad_request(EMPTY_VALUE_MESSAGE)

        documents, message = await self._repository.term(self._index, "first_name", first_name)
        return self._many(documents, message)

    async def get_by_first_name_list(self, first_names: list[str] | None) -> Result[list[AuthorDto]]:
        if not first_names:
            return Result.bad_request(EMPTY_VALUE_MESSAGE)

        documents, message = await self._repository.terms(self._index, "first_name", first_names)
        return self._many(documents, message)

    async def get_by_last_name_prefix(self, prefix: str | None) -> Result[list[AuthorDto]]:
        if is_blank(prefix):
            return Result.bad_request(EMPTY_VALUE_MESSAGE)

        documents, message = await self._repository.prefix(self._index, "last_name", prefix)
        return self._many(documents, message)

    async def insert(self, model: CreateAuthorModel | None, actor: int | None = None) -> Result[AuthorDto]:
        return await self._insert(model.to_entity() if model else None, actor)

    async def update(self, model: UpdateAuthorModel | None, actor: int | None = None) -> Result[AuthorDto]:
        return await self._update(model.to_entity() if model else None, actor)
