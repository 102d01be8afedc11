"""Book service."""

from __future__ import annotations

from datetime import datetime, timedelta

from shelfsearch.config.settings import AuditSettings
from shelfsearch.models.book import Book, BookDto, CreateBookModel, SearchBookModel, UpdateBookModel
from shelfsearch.models.query import CompoundQueryModel
from shelfsearch.models.result import Result
from shelfsearch.repositories.book import BookRepository
from shelfsearch.services.base import EMPTY_MODEL_MESSAGE, EMPTY_VALUE_MESSAGE, EntityService, is_blank

# Typos tolerated by the abstract full-text lookup.
ABSTRACT_FUZZINESS = 1


class BookService(EntityService[Book, BookDto]):
    """Book lookups, searches and writes against the ``books`` index."""

    _repository: BookRepository

    def __init__(self, repository: BookRepository, index: str = "books", audit: AuditSettings | None = None) -> None:
        super().__init__(repository, index, BookDto.from_entity, audit)

    # ── Exact lookups ────────────────────────────────────────────────────

    async def get_by_title(self, title: str | None) -> Result[list[BookDto]]:
        if is_blank(title):
            return Result.bad_request(EMPTY_VALUE_MESSAGE)

        documents, message = await self._repository.term(self._index, "title", title)
        return self._many(documents, message)

    async def get_by_title_list(self, titles: list[str] | None) -> Result[list[BookDto]]:
        if not titles:
            return Result.bad_request(EMPTY_VALUE_MESSAGE)

        documents, message = await self._repository.terms(self._index, "title", titles)
        return self._many(documents, message)

    async def get_by_title_pattern(self, pattern: str | None) -> Result[list[BookDto]]:
        """Glob on the title, e.g. ``elastic*`` or ``?ook``."""
        if is_blank(pattern):
            return Result.bad_request(EMPTY_VALUE_MESSAGE)

        documents, message = await self._repository.wildcard(self._index, "title", pattern)
        return self._many(documents, message)

    async def get_by_title_fuzzy(self, title: str | None, max_edits: int = 1) -> Result[list[BookDto]]:
        if is_blank(title):
            return Result.bad_request(EMPTY_VALUE_MESSAGE)

        documents, message = await self._repository.fuzzy(self._index, "title", title, max_edits)
        return self._many(documents, message)

    # ── Ranges ───────────────────────────────────────────────────────────

    async def get_by_publish_date(self, publish_date: datetime) -> Result[list[BookDto]]:
        """Books published on the calendar day of ``publish_date``."""
        day = publish_date.replace(hour=0, minute=0, second=0, microsecond=0)
        documents, message = await self._repository.date_range(
            self._index, "publish_date", day, day + timedelta(days=1)
        )
        return self._many(documents, message)

    async def get_by_publish_date_range(self, start: datetime, end: datetime) -> Result[list[BookDto]]:
        if end <= start:
            return Result.bad_request("End date must be after start date.")

        documents, message = await self._repository.date_range(self._index, "publish_date", start, end)
        return self._many(documents, message)

    async def get_by_price_range(self, min_price: float, max_price: float) -> Result[list[BookDto]]:
        if max_price < min_price:
            return Result.bad_request("Maximum price must not be below minimum price.")

        documents, message = await self._repository.number_range(self._index, "price", min_price, max_price)
        return self._many(documents, message)

    # ── Text search ──────────────────────────────────────────────────────

    async def get_by_abstract(self, text: str | None) -> Result[list[BookDto]]:
        if is_blank(text):
            return Result.bad_request(EMPTY_VALUE_MESSAGE)

        documents, message = await self._repository.full_text_match(
            self._index, "abstract", text, ABSTRACT_FUZZINESS
        )
        return self._many(documents, message)

    async def search(self, text: str | None) -> Result[list[BookDto]]:
        """Single-box search over title and abstract."""
        if is_blank(text):
            return Result.bad_request(EMPTY_VALUE_MESSAGE)

        documents, message = await self._repository.search_text(self._index, text)
        if message:
            return Result.bad_request(f"An error occurred while retrieving data. Error: {message}")
        return Result.ok([BookDto.from_entity(doc) for doc in documents])

    async def filter(self, model: SearchBookModel | None) -> Result[list[BookDto]]:
        if model is None:
            return Result.bad_request(EMPTY_MODEL_MESSAGE)

        documents, message = await self._repository.filter(self._index, model)
        if message:
            return Result.bad_request(f"An error occurred while retrieving data. Error: {message}")
        return Result.ok([BookDto.from_entity(doc) for doc in documents])

    async def compound(self, model: CompoundQueryModel | None) -> Result[list[BookDto]]:
        if model is None or model.is_empty():
            return Result.bad_request(EMPTY_MODEL_MESSAGE)

        documents, message = await self._repository.compound(
            self._index,
            must=[(c.field, c.value) for c in model.must],
            must_not=[(c.field, c.value) for c in model.must_not],
            should=[(c.field, c.value) for c in model.should],
            filter=[(c.field, c.value) for c in model.filter],
            page_size=model.page_size,
            page=model.page,
        )
        return self._many(documents, message)

    # ── Writes ───────────────────────────────────────────────────────────

    async def insert(self, model: CreateBookModel | None, actor: int | None = None) -> Result[BookDto]:
        return await self._insert(model.to_entity() if model else None, actor)

    async def update(self, model: UpdateBookModel | None, actor: int | None = None) -> Result[BookDto]:
        return await self._update(model.to_entity() if model else None, actor)
