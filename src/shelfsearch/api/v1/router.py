"""API v1 Router — Author, book and health endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from shelfsearch.api.v1.endpoints.authors import router as authors_router
from shelfsearch.api.v1.endpoints.books import router as books_router
from shelfsearch.api.v1.endpoints.health import router as health_router

router = APIRouter(tags=["v1"])
router.include_router(authors_router, prefix="/author")
router.include_router(books_router, prefix="/book")
router.include_router(health_router)
