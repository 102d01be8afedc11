"""Integration tests for the repositories against a real OpenSearch node."""

from __future__ import annotations

from datetime import datetime

import pytest
from support.live_index import AUTHORS_INDEX, BOOKS_INDEX, refresh

from shelfsearch.engine.opensearch import OpenSearchEngine
from shelfsearch.models.book import Book, SearchBookModel
from shelfsearch.repositories.author import AuthorRepository
from shelfsearch.repositories.book import BookRepository

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def engine(opensearch_ready):
    e = OpenSearchEngine(hosts=[opensearch_ready], verify_certs=False)
    await e.initialize()
    yield e
    await e.shutdown()


@pytest.fixture
def books(engine) -> BookRepository:
    return BookRepository(engine)


class TestOpenSearchHealth:
    async def test_health_check_returns_status(self, engine):
        health = await engine.health_check()
        assert health.status in ("healthy", "degraded")
        assert health.latency_ms >= 0


class TestOpenSearchQueries:
    async def test_ids_restored(self, books):
        documents, message = await books.match_all(BOOKS_INDEX)
        assert message == ""
        assert {d.id for d in documents} >= {"book-001", "book-002", "book-003"}

    async def test_term_is_case_insensitive(self, books):
        documents, _ = await books.term(BOOKS_INDEX, "title", "google")
        assert [d.id for d in documents] == ["book-002"]

    async def test_fuzzy_boundary(self, books):
        hit, _ = await books.fuzzy(BOOKS_INDEX, "title", "Googla", 1)
        miss, _ = await books.fuzzy(BOOKS_INDEX, "title", "Goopla", 1)
        assert [d.id for d in hit] == ["book-002"]
        assert miss == []

    async def test_filter_partial_title(self, books):
        documents, message = await books.filter(BOOKS_INDEX, SearchBookModel(title="elastic"))
        assert message == ""
        assert "book-001" in [d.id for d in documents]

    async def test_publish_date_range(self, books):
        documents, _ = await books.date_range(BOOKS_INDEX, "publish_date", datetime(2015, 1, 1), datetime(2022, 1, 1))
        assert sorted(d.id for d in documents) == ["book-001", "book-003"]

    async def test_prefix_on_authors(self, engine):
        documents, _ = await AuthorRepository(engine).prefix(AUTHORS_INDEX, "last_name", "Turn")
        assert [d.id for d in documents] == ["author-002"]

    async def test_missing_index_reports_message(self, books):
        documents, message = await books.match_all("it-does-not-exist")
        assert documents == []
        assert message


class TestOpenSearchWrites:
    async def test_index_update_soft_delete_delete(self, books, opensearch_ready):
        book, message = await books.index(Book(title="Dune", price=9.99, stock=1), BOOKS_INDEX, actor=1111)
        assert message == ""
        assert book is not None and book.id

        updated, message = await books.update(Book(id=book.id, title="Dune Messiah"), BOOKS_INDEX, actor=2222)
        assert message == ""
        assert updated is not None

        done, _ = await books.soft_delete(book.id, BOOKS_INDEX, actor=2222)
        assert done is True
        await refresh(opensearch_ready, BOOKS_INDEX)

        stored, _ = await books.get(book.id, BOOKS_INDEX)
        assert stored is not None
        assert stored.title == "Dune Messiah"
        assert stored.price == 9.99
        assert stored.created_by == 1111
        assert stored.is_active is False

        deleted, _ = await books.delete(book.id, BOOKS_INDEX)
        assert deleted is True
        gone, message = await books.get(book.id, BOOKS_INDEX)
        assert gone is None
        assert "not found" in message
