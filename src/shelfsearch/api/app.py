"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shelfsearch import __version__
from shelfsearch.api.deps import build_services, set_services
from shelfsearch.api.v1.router import router as v1_router
from shelfsearch.config.settings import Settings
from shelfsearch.engine.base import SearchEngine
from shelfsearch.engine.opensearch import OpenSearchEngine
from shelfsearch.observability.logging import setup_logging

logger = logging.getLogger(__name__)

# Set by the CLI so factory-built workers load the same YAML file.
CONFIG_ENV_VAR = "SHELFSEARCH_CONFIG_FILE"


def create_engine(settings: Settings) -> OpenSearchEngine:
    """Build the shared engine client from configuration."""
    return OpenSearchEngine(
        hosts=settings.engine.hosts,
        username=settings.engine.username,
        password=settings.engine.password,
        verify_certs=settings.engine.verify_certs,
        timeout=settings.engine.timeout,
        **settings.engine.extra,
    )


def create_app(settings: Settings | None = None, engine: SearchEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.
        engine: Engine client to use instead of one built from ``settings``.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        yaml_path = Path(os.environ.get(CONFIG_ENV_VAR, "shelfsearch-config.yaml"))
        if yaml_path.exists():
            logger.info("Loading configuration from %s", yaml_path)
            settings = Settings.from_yaml(yaml_path)
        else:
            settings = Settings()

    setup_logging(settings.observability)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        logger.info("Starting ShelfSearch v%s", __version__)

        search_engine = engine or create_engine(settings)
        await search_engine.initialize()

        services = build_services(search_engine, settings)
        set_services(services)

        app.state.settings = settings
        app.state.services = services

        logger.info(
            "ShelfSearch is ready (indices: authors=%s, books=%s)",
            settings.indices.authors,
            settings.indices.books,
        )
        yield

        logger.info("Shutting down ShelfSearch...")
        await search_engine.shutdown()
        set_services(None)
        logger.info("ShelfSearch shutdown complete")

    app = FastAPI(
        title="ShelfSearch",
        description="Typed CRUD and search API for authors and books backed by a document search engine.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/v1")

    return app
