"""Result envelope — Uniform outcome returned by every service operation.

The envelope only classifies the outcome. Turning a classification into an
HTTP status is done once, at the API boundary (``shelfsearch.api.responses``).
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ResultStatus(str, Enum):
    """Outcome classification of a service call."""

    OK = "ok"
    NO_CONTENT = "no_content"
    BAD_REQUEST = "bad_request"
    # Reserved: no current service path produces these two.
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"


class Result(BaseModel, Generic[T]):
    """Status, payload and messages of one service operation.

    ``data`` is only ever set on an ``OK`` result. Build instances through the
    classmethod constructors rather than directly.
    """

    status: ResultStatus = Field(description="Outcome classification")
    success: bool = Field(description="False for client or access errors")
    messages: list[str] = Field(default_factory=list, description="Diagnostic messages, in order")
    data: T | None = Field(default=None, description="Payload, present only on OK")

    @classmethod
    def ok(cls, data: T | None) -> Result[T]:
        return cls(status=ResultStatus.OK, success=True, data=data)

    @classmethod
    def no_content(cls, message: str) -> Result[T]:
        return cls(status=ResultStatus.NO_CONTENT, success=True, messages=[message])

    @classmethod
    def bad_request(cls, message: str) -> Result[T]:
        return cls(status=ResultStatus.BAD_REQUEST, success=False, messages=[message])

    @classmethod
    def not_found(cls, message: str) -> Result[T]:
        return cls(status=ResultStatus.NOT_FOUND, success=False, messages=[message])

    @classmethod
    def unauthorized(cls, message: str) -> Result[T]:
        return cls(status=ResultStatus.UNAUTHORIZED, success=False, messages=[message])
