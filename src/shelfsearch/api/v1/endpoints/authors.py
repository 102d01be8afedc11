"""Author endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Response

from shelfsearch.api.deps import get_author_service
from shelfsearch.api.responses import to_response
from shelfsearch.models.author import CreateAuthorModel, UpdateAuthorModel
from shelfsearch.services.author import AuthorService

router = APIRouter(tags=["authors"])


@router.get("/getall", summary="List authors")
async def get_all(
    page_size: int = 10,
    page: int = 1,
    service: AuthorService = Depends(get_author_service),
) -> Response:
    return to_response(await service.get_all(page_size, page))


@router.get("/getbyid", summary="Get an author by id")
async def get_by_id(id: str | None = None, service: AuthorService = Depends(get_author_service)) -> Response:
    return to_response(await service.get_by_id(id))


@router.get("/getbyfirstname", summary="Exact first-name lookup")
async def get_by_first_name(
    first_name: str | None = None,
    service: AuthorService = Depends(get_author_service),
) -> Response:
    return to_response(await service.get_by_first_name(first_name))


@router.post("/getbyfirstnamelist", summary="Authors matching any of several first names")
async def get_by_first_name_list(
    first_names: list[str] | None = Body(default=None),
    service: AuthorService = Depends(get_author_service),
) -> Response:
    return to_response(await service.get_by_first_name_list(first_names))


@router.get("/getbylastnameprefix", summary="Authors whose last name starts with a prefix")
async def get_by_last_name_prefix(
    prefix: str | None = None,
    service: AuthorService = Depends(get_author_service),
) -> Response:
    return to_response(await service.get_by_last_name_prefix(prefix))


@router.post("/insert", summary="Insert an author")
async def insert(model: CreateAuthorModel, service: AuthorService = Depends(get_author_service)) -> Response:
    return to_response(await service.insert(model))


@router.put("/update", summary="Partially update an author")
async def update(model: UpdateAuthorModel, service: AuthorService = Depends(get_author_service)) -> Response:
    return to_response(await service.update(model))


@router.delete("/delete", summary="Permanently delete an author")
async def delete(id: str | None = None, service: AuthorService = Depends(get_author_service)) -> Response:
    return to_response(await service.delete(id))


@router.delete("/deactivate", summary="Flag an author inactive")
async def deactivate(id: str | None = None, service: AuthorService = Depends(get_author_service)) -> Response:
    return to_response(await service.deactivate(id))
