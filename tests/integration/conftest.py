"""Integration test fixtures — Live OpenSearch backend with seeded authors and books."""

from __future__ import annotations

import asyncio

import pytest
from support.live_index import ENGINE_URL, seed, wait_for_service


@pytest.fixture(scope="session")
def opensearch_ready() -> str:
    """Ensure OpenSearch is running and seeded."""
    if not wait_for_service(ENGINE_URL, timeout=10.0):
        pytest.skip(f"OpenSearch not available at {ENGINE_URL}")
    asyncio.run(seed(ENGINE_URL))
    return ENGINE_URL
