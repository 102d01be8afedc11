"""Book documents and the request/response shapes built around them."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from shelfsearch.models.author import Author, AuthorDto
from shelfsearch.models.document import AuditedDocument


class Book(AuditedDocument):
    """A book as stored in the ``books`` index."""

    title: str = Field(description="Book title (analyzed, with a keyword sub-field)")
    abstract: str = Field(default="", description="Summary text (analyzed)")
    price: float = Field(default=0.0, ge=0, description="Unit price")
    stock: int = Field(default=0, ge=0, description="Units in stock")
    publish_date: datetime | None = Field(default=None, description="Publication date")
    categories: list[str] = Field(default_factory=list, description="Category labels")
    author: Author | None = Field(default=None, description="Embedded author copy")


class CreateBookModel(BaseModel):
    """Payload for inserting a book."""

    title: str
    abstract: str = ""
    price: float = Field(default=0.0, ge=0)
    stock: int = Field(default=0, ge=0)
    publish_date: datetime | None = None
    categories: list[str] = Field(default_factory=list)

    def to_entity(self) -> Book:
        return Book(**self.model_dump(exclude_unset=True))


class UpdateBookModel(CreateBookModel):
    """Payload for a partial update of an existing book."""

    id: str


class SearchBookModel(BaseModel):
    """Multi-criteria book search. Every criterion left empty is ignored."""

    title: str | None = Field(default=None, description="Partial, typo-tolerant title text")
    abstract: str | None = Field(default=None, description="Partial, typo-tolerant abstract text")
    min_price: float | None = Field(default=None, description="Lowest accepted price")
    min_stock: int | None = Field(default=None, description="Lowest accepted stock")
    publish_date_start: datetime | None = Field(default=None, description="Publish date bound")
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=1000)


class BookDto(BaseModel):
    """Book record returned to API callers."""

    id: str | None = None
    title: str
    abstract: str = ""
    price: float = 0.0
    stock: int = 0
    publish_date: datetime | None = None
    categories: list[str] = Field(default_factory=list)
    author: AuthorDto | None = None
    created_at: datetime | None = None
    created_by: int | None = None
    updated_at: datetime | None = None
    updated_by: int | None = None
    is_active: bool = True

    @classmethod
    def from_entity(cls, book: Book) -> BookDto:
        return cls.model_validate(book.model_dump())


# Author and Book embed each other.
Author.model_rebuild(_types_namespace={"Book": Book})
AuthorDto.model_rebuild(_types_namespace={"BookDto": BookDto})
Book.model_rebuild()
BookDto.model_rebuild()
