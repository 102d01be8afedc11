"""Shared test fixtures and configuration."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest
from support.memory_engine import InMemoryEngine

from shelfsearch.config.settings import Settings
from shelfsearch.repositories.author import AuthorRepository
from shelfsearch.repositories.book import BookRepository
from shelfsearch.services.author import AuthorService
from shelfsearch.services.book import BookService


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        observability={"log_level": "warning", "log_format": "console"},
    )


@pytest.fixture
def engine() -> InMemoryEngine:
    return InMemoryEngine()


# ── Seed data ─────────────────────────────────────────────────────────────────


@pytest.fixture
def book_sources() -> dict[str, dict[str, Any]]:
    """Book bodies keyed by id, as the engine would store them."""
    return {
        "b-1": {
            "title": "Elasticsearch in Action",
            "abstract": "A practical guide to indexing and searching documents at scale.",
            "price": 45.0,
            "stock": 12,
            "publish_date": "2021-03-15T00:00:00",
            "categories": ["search", "databases"],
            "created_by": 1111,
            "is_active": True,
        },
        "b-2": {
            "title": "Google",
            "abstract": "How a search company grew into an advertising giant.",
            "price": 18.5,
            "stock": 0,
            "publish_date": "2009-11-02T00:00:00",
            "categories": ["business"],
            "created_by": 1111,
            "is_active": True,
        },
        "b-3": {
            "title": "Relevant Search",
            "abstract": "Applied relevance tuning for Solr and Elasticsearch engines.",
            "price": 39.99,
            "stock": 4,
            "publish_date": "2016-06-30T00:00:00",
            "categories": ["search"],
            "created_by": 1111,
            "is_active": True,
        },
    }


@pytest.fixture
def author_sources() -> dict[str, dict[str, Any]]:
    """Author bodies keyed by id."""
    return {
        "a-1": {"first_name": "Radu", "last_name": "Gheorghe", "birth_date": "1980-01-01T00:00:00"},
        "a-2": {"first_name": "Doug", "last_name": "Turnbull"},
        "a-3": {"first_name": "John", "last_name": "Berryman"},
    }


@pytest.fixture
def seeded_engine(
    engine: InMemoryEngine,
    settings: Settings,
    book_sources: dict[str, dict[str, Any]],
    author_sources: dict[str, dict[str, Any]],
) -> InMemoryEngine:
    engine.seed(settings.indices.books, book_sources)
    engine.seed(settings.indices.authors, author_sources)
    return engine


# ── Repositories and services ─────────────────────────────────────────────────


@pytest.fixture
def book_repository(seeded_engine: InMemoryEngine) -> BookRepository:
    return BookRepository(seeded_engine)


@pytest.fixture
def author_repository(seeded_engine: InMemoryEngine) -> AuthorRepository:
    return AuthorRepository(seeded_engine)


@pytest.fixture
def book_service(book_repository: BookRepository, settings: Settings) -> BookService:
    return BookService(book_repository, settings.indices.books, settings.audit)


@pytest.fixture
def author_service(author_repository: AuthorRepository, settings: Settings) -> AuthorService:
    return AuthorService(author_repository, settings.indices.authors, settings.audit)


@pytest.fixture
def publish_day() -> datetime:
    return datetime(2016, 6, 30, 15, 45)
