"""Author documents and the request/response shapes built around them."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from shelfsearch.models.document import AuditedDocument

if TYPE_CHECKING:
    from shelfsearch.models.book import Book, BookDto


class Author(AuditedDocument):
    """An author as stored in the ``authors`` index.

    ``books`` embeds full book copies; keeping them in sync with the
    ``books`` index is up to the caller.
    """

    first_name: str = Field(description="Given name")
    last_name: str = Field(description="Family name")
    birth_date: datetime | None = Field(default=None, description="Date of birth")
    books: list[Book] = Field(default_factory=list, description="Embedded book copies")


class CreateAuthorModel(BaseModel):
    """Payload for inserting an author."""

    first_name: str
    last_name: str
    birth_date: datetime | None = None

    def to_entity(self) -> Author:
        return Author(**self.model_dump(exclude_unset=True))


class UpdateAuthorModel(CreateAuthorModel):
    """Payload for a partial update of an existing author."""

    id: str


class AuthorDto(BaseModel):
    """Author record returned to API callers."""

    id: str | None = None
    first_name: str
    last_name: str
    birth_date: datetime | None = None
    books: list[BookDto] = Field(default_factory=list)
    created_at: datetime | None = None
    created_by: int | None = None
    updated_at: datetime | None = None
    updated_by: int | None = None
    is_active: bool = True

    @classmethod
    def from_entity(cls, author: Author) -> AuthorDto:
        return cls.model_validate(author.model_dump())
