"""Health check endpoints — Service and search engine health."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from shelfsearch import __version__
from shelfsearch.api.deps import get_engine
from shelfsearch.engine.base import EngineHealth, SearchEngine

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """System health check response."""

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="ShelfSearch server version")
    service: str = Field(description="Service name ('shelfsearch')")
    engine: str = Field(description="Name of the search engine client in use")


@router.get("/health", response_model=HealthResponse, summary="System Health Check")
async def health_check(engine: SearchEngine = Depends(get_engine)) -> HealthResponse:
    return HealthResponse(status="healthy", version=__version__, service="shelfsearch", engine=engine.name)


@router.get("/health/engine", response_model=EngineHealth, summary="Search Engine Health Check")
async def engine_health(engine: SearchEngine = Depends(get_engine)) -> EngineHealth:
    """Cluster health as reported by the engine."""
    health = await engine.health_check()
    if health.status != "healthy":
        logger.warning("Search engine reports %s: %s", health.status, health.message)
    return health
