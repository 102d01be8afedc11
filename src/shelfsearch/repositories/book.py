"""Book repository — Generic primitives plus the book search assemblers."""

from __future__ import annotations

import logging

from shelfsearch.engine.base import SearchEngine
from shelfsearch.models.book import Book, SearchBookModel
from shelfsearch.query import dsl
from shelfsearch.query.dsl import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, Query
from shelfsearch.repositories.base import Repository

logger = logging.getLogger(__name__)

# Typos tolerated per token in free-text title/abstract criteria.
TEXT_FUZZINESS = 2


def build_filter_clauses(model: SearchBookModel) -> list[Query]:
    """One ``must`` clause per criterion present on ``model``.

    Empty strings, ``None`` and zero count as absent, so the clause list
    always has exactly as many entries as criteria were supplied.
    """
    clauses: list[Query] = []

    if model.title and model.title.strip():
        clauses.append(dsl.match_bool_prefix("title", model.title, TEXT_FUZZINESS))

    if model.abstract and model.abstract.strip():
        clauses.append(dsl.match_bool_prefix("abstract", model.abstract, TEXT_FUZZINESS))

    if model.min_price:
        clauses.append(dsl.filtered(dsl.number_range("price", start=model.min_price)))

    if model.min_stock:
        clauses.append(dsl.filtered(dsl.number_range("stock", start=model.min_stock)))

    # NOTE: publish_date_start is applied as an upper bound (publish_date <= value),
    # which is the opposite of what its name suggests. Kept as-is until product
    # confirms which direction is intended.
    if model.publish_date_start is not None:
        clauses.append({"range": {"publish_date": {"lte": model.publish_date_start.isoformat()}}})

    return clauses


def build_filter_query(model: SearchBookModel | None) -> Query:
    """Conjunction of the criteria on ``model``; match-all when there is no model."""
    if model is None:
        return dsl.match_all()
    return dsl.bool_query(must=build_filter_clauses(model))


def build_text_query(search_text: str) -> Query:
    """At least one of title or abstract must prefix-match ``search_text``."""
    return dsl.bool_query(
        should=[
            dsl.match_bool_prefix("abstract", search_text),
            dsl.match_bool_prefix("title", search_text),
        ],
        minimum_should_match=1,
    )


class BookRepository(Repository[Book]):
    """Book access with the single-box and multi-criteria search assemblers."""

    def __init__(self, engine: SearchEngine) -> None:
        super().__init__(engine, Book)

    async def search_text(
        self,
        index: str,
        search_text: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> tuple[list[Book], str]:
        """Single search box: partial words in either title or abstract."""
        return await self._search(index, build_text_query(search_text), page_size, page)

    async def filter(self, index: str, model: SearchBookModel | None) -> tuple[list[Book], str]:
        """Multi-criteria search; each supplied criterion narrows the result."""
        query = build_filter_query(model)
        if model is None:
            return await self._search(index, query)

        logger.debug("Book filter with %d clause(s)", len(query["bool"].get("must", [])))
        return await self._search(index, query, model.page_size, model.page)
