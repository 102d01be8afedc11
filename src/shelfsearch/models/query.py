"""Compound query request model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class TermClause(BaseModel):
    """Exact value expected on a field."""

    field: str
    value: str


class NumberClause(BaseModel):
    """Numeric bound on a field."""

    field: str
    value: float


class DateClause(BaseModel):
    """Date bound on a field."""

    field: str
    value: datetime


class CompoundQueryModel(BaseModel):
    """Boolean query over must / must_not / should / filter clauses.

    - ``must``: exact-term requirements, scored.
    - ``must_not``: excludes documents whose field is <= the value.
    - ``should``: documents whose date field is >= the value rank higher; never filters.
    - ``filter``: exact-term requirements, not scored.
    """

    must: list[TermClause] = Field(default_factory=list)
    must_not: list[NumberClause] = Field(default_factory=list)
    should: list[DateClause] = Field(default_factory=list)
    filter: list[TermClause] = Field(default_factory=list)
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=1000)

    def is_empty(self) -> bool:
        return not (self.must or self.must_not or self.should or self.filter)
