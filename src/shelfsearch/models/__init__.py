"""Domain models: documents, request payloads, DTOs and the result envelope."""

from shelfsearch.models.author import Author, AuthorDto, CreateAuthorModel, UpdateAuthorModel
from shelfsearch.models.book import Book, BookDto, CreateBookModel, SearchBookModel, UpdateBookModel
from shelfsearch.models.document import AuditedDocument, Auditable
from shelfsearch.models.result import Result, ResultStatus

__all__ = [
    "Auditable",
    "AuditedDocument",
    "Author",
    "AuthorDto",
    "Book",
    "BookDto",
    "CreateAuthorModel",
    "CreateBookModel",
    "Result",
    "ResultStatus",
    "SearchBookModel",
    "UpdateAuthorModel",
    "UpdateBookModel",
]
