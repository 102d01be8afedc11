"""Book endpoints."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Body, Depends, Response

from shelfsearch.api.deps import get_book_service
from shelfsearch.api.responses import to_response
from shelfsearch.models.book import CreateBookModel, SearchBookModel, UpdateBookModel
from shelfsearch.models.query import CompoundQueryModel
from shelfsearch.services.book import BookService

router = APIRouter(tags=["books"])


@router.get("/getall", summary="List books")
async def get_all(
    page_size: int = 10,
    page: int = 1,
    service: BookService = Depends(get_book_service),
) -> Response:
    return to_response(await service.get_all(page_size, page))


@router.get("/getbyid", summary="Get a book by id")
async def get_by_id(id: str | None = None, service: BookService = Depends(get_book_service)) -> Response:
    return to_response(await service.get_by_id(id))


@router.get("/getbyname", summary="Exact title lookup")
async def get_by_title(title: str | None = None, service: BookService = Depends(get_book_service)) -> Response:
    return to_response(await service.get_by_title(title))


@router.post("/getbynamelist", summary="Books matching any of several titles")
async def get_by_title_list(
    titles: list[str] | None = Body(default=None),
    service: BookService = Depends(get_book_service),
) -> Response:
    return to_response(await service.get_by_title_list(titles))


@router.get("/getbytitlepattern", summary="Title glob match (? and *)")
async def get_by_title_pattern(
    pattern: str | None = None,
    service: BookService = Depends(get_book_service),
) -> Response:
    return to_response(await service.get_by_title_pattern(pattern))


@router.get("/getbytitlefuzzy", summary="Typo-tolerant exact title lookup")
async def get_by_title_fuzzy(
    title: str | None = None,
    max_edits: int = 1,
    service: BookService = Depends(get_book_service),
) -> Response:
    return to_response(await service.get_by_title_fuzzy(title, max_edits))


@router.get("/getbypublishdate", summary="Books published on a given day")
async def get_by_publish_date(
    publish_date: datetime,
    service: BookService = Depends(get_book_service),
) -> Response:
    return to_response(await service.get_by_publish_date(publish_date))


@router.get("/getbypublishdaterange", summary="Books published in [start, end)")
async def get_by_publish_date_range(
    start: datetime,
    end: datetime,
    service: BookService = Depends(get_book_service),
) -> Response:
    return to_response(await service.get_by_publish_date_range(start, end))


@router.get("/getbypricerange", summary="Books priced in [min_price, max_price]")
async def get_by_price_range(
    min_price: float,
    max_price: float,
    service: BookService = Depends(get_book_service),
) -> Response:
    return to_response(await service.get_by_price_range(min_price, max_price))


@router.get("/getbyabstract", summary="Full-text search on the abstract")
async def get_by_abstract(text: str | None = None, service: BookService = Depends(get_book_service)) -> Response:
    return to_response(await service.get_by_abstract(text))


@router.get("/search", summary="Single-box search over title and abstract")
async def search(text: str | None = None, service: BookService = Depends(get_book_service)) -> Response:
    return to_response(await service.search(text))


@router.post("/filter", summary="Multi-criteria book search")
async def filter_books(model: SearchBookModel, service: BookService = Depends(get_book_service)) -> Response:
    return to_response(await service.filter(model))


@router.post("/compound", summary="Boolean must / must_not / should / filter search")
async def compound(model: CompoundQueryModel, service: BookService = Depends(get_book_service)) -> Response:
    return to_response(await service.compound(model))


@router.post("/insert", summary="Insert a book")
async def insert(model: CreateBookModel, service: BookService = Depends(get_book_service)) -> Response:
    return to_response(await service.insert(model))


@router.put("/update", summary="Partially update a book")
async def update(model: UpdateBookModel, service: BookService = Depends(get_book_service)) -> Response:
    return to_response(await service.update(model))


@router.delete("/delete", summary="Permanently delete a book")
async def delete(id: str | None = None, service: BookService = Depends(get_book_service)) -> Response:
    return to_response(await service.delete(id))


@router.delete("/deactivate", summary="Flag a book inactive")
async def deactivate(id: str | None = None, service: BookService = Depends(get_book_service)) -> Response:
    return to_response(await service.deactivate(id))
