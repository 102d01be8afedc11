"""Repositories: generic query builder and per-type extensions."""

from shelfsearch.repositories.author import AuthorRepository
from shelfsearch.repositories.base import Repository
from shelfsearch.repositories.book import BookRepository

__all__ = ["AuthorRepository", "BookRepository", "Repository"]
