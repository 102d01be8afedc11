"""API dependencies — Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from shelfsearch.config.settings import Settings
from shelfsearch.engine.base import SearchEngine
from shelfsearch.repositories.author import AuthorRepository
from shelfsearch.repositories.book import BookRepository
from shelfsearch.services.author import AuthorService
from shelfsearch.services.book import BookService


@dataclass
class Services:
    """Everything the routes need, built around one shared engine client."""

    engine: SearchEngine
    authors: AuthorService
    books: BookService


def build_services(engine: SearchEngine, settings: Settings) -> Services:
    """Wire repositories and services onto ``engine``."""
    return Services(
        engine=engine,
        authors=AuthorService(AuthorRepository(engine), settings.indices.authors, settings.audit),
        books=BookService(BookRepository(engine), settings.indices.books, settings.audit),
    )


# Global service container (set during application lifespan)
_services: Services | None = None


def set_services(services: Services | None) -> None:
    """Set the global service container (called during app lifespan)."""
    global _services
    _services = services


def get_services() -> Services:
    """Get the global service container.

    Raises:
        RuntimeError: If the services are not initialized.
    """
    if _services is None:
        raise RuntimeError("ShelfSearch services not initialized. Is the server running?")
    return _services


def get_engine() -> SearchEngine:
    return get_services().engine


def get_author_service() -> AuthorService:
    return get_services().authors


def get_book_service() -> BookService:
    return get_services().books
