"""Author repository."""

from __future__ import annotations

from shelfsearch.engine.base import SearchEngine
from shelfsearch.models.author import Author
from shelfsearch.repositories.base import Repository


class AuthorRepository(Repository[Author]):
    """Authors need nothing beyond the generic query primitives."""

    def __init__(self, engine: SearchEngine) -> None:
        super().__init__(engine, Author)
