"""Envelope to HTTP mapping.

| Envelope status | HTTP |
|---|---|
| OK with data | 200 |
| OK without data | 204 |
| NO_CONTENT | 200 (body carries the envelope) |
| BAD_REQUEST | 400 |
| NOT_FOUND | 404 |
| UNAUTHORIZED | 401 |

NO_CONTENT deliberately answers 200; existing clients read its messages.
"""

from __future__ import annotations

from typing import Any

from fastapi import Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from shelfsearch.models.result import Result, ResultStatus

_STATUS_CODES = {
    ResultStatus.OK: 200,
    ResultStatus.NO_CONTENT: 200,
    ResultStatus.BAD_REQUEST: 400,
    ResultStatus.NOT_FOUND: 404,
    ResultStatus.UNAUTHORIZED: 401,
}


class UnhandledResultError(RuntimeError):
    """Raised for an envelope status with no HTTP mapping."""


def to_response(result: Result[Any]) -> Response:
    """Translate a service envelope into the HTTP response sent to the client."""
    if result.status == ResultStatus.OK and result.data is None:
        return Response(status_code=204)

    status_code = _STATUS_CODES.get(result.status)
    if status_code is None:
        raise UnhandledResultError(f"An unhandled result has occurred as a result of a service call: {result.status!r}")
    return JSONResponse(status_code=status_code, content=jsonable_encoder(result))
