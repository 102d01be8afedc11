"""Audited document model — Fields every indexed document carries.

The engine returns a hit's identifier next to the document body, never inside
it, so ``id`` is excluded from what gets sent to the engine and is restored
from the hit after every read.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class Auditable(Protocol):
    """Capability any document type needs to get the full query-builder API."""

    id: str | None
    created_at: datetime | None
    created_by: int | None
    updated_at: datetime | None
    updated_by: int | None
    is_active: bool

    @classmethod
    def model_validate(cls, obj: Any) -> Any: ...

    def to_source(self) -> dict[str, Any]: ...

    def to_partial_source(self) -> dict[str, Any]: ...


class AuditedDocument(BaseModel):
    """Base model for documents stored in a search index."""

    model_config = ConfigDict(validate_assignment=True)

    id: str | None = Field(default=None, description="Engine-side identifier (assigned by the engine if omitted)")
    created_at: datetime | None = Field(default=None, description="Set once, on first insert")
    created_by: int | None = Field(default=None, description="Identity that inserted the document")
    updated_at: datetime | None = Field(default=None, description="Set on every update")
    updated_by: int | None = Field(default=None, description="Identity that last updated the document")
    is_active: bool = Field(default=True, description="Soft-delete flag")

    def to_source(self) -> dict[str, Any]:
        """Serialize the document body as sent to the engine (no ``id``)."""
        return self.model_dump(mode="json", exclude={"id"}, exclude_none=True)

    def to_partial_source(self) -> dict[str, Any]:
        """Body for a partial-document merge: unset fields are left untouched."""
        return self.model_dump(mode="json", exclude={"id"}, exclude_unset=True)
