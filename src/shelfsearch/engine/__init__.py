"""Search engine client layer."""

from shelfsearch.engine.base import (
    EngineHealth,
    GetResult,
    IndexResult,
    SearchEngine,
    SearchHit,
    SearchResult,
    WriteResult,
)

__all__ = [
    "EngineHealth",
    "GetResult",
    "IndexResult",
    "SearchEngine",
    "SearchHit",
    "SearchResult",
    "WriteResult",
]
