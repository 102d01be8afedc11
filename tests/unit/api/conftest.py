"""API test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from support.memory_engine import InMemoryEngine

from shelfsearch.api.app import create_app
from shelfsearch.config.settings import Settings


@pytest.fixture
def client(settings: Settings, seeded_engine: InMemoryEngine) -> Iterator[TestClient]:
    """Test client whose lifespan wires the services onto the in-memory engine."""
    app = create_app(settings, engine=seeded_engine)
    with TestClient(app) as test_client:
        yield test_client
