"""Service layer: validation, DTO mapping and result envelopes."""

from shelfsearch.services.author import AuthorService
from shelfsearch.services.book import BookService

__all__ = ["AuthorService", "BookService"]
