"""Standardized error response models and helpers."""

from __future__ import annotations

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from principal_auth.middleware.request_id import new_request_id


class ErrorResponse(BaseModel):
    type: str
    code: str
    message: str
    trace_id: str | None = None

    model_config = {"json_schema_extra": {"example": {
        "type": "authentication_error",
        "code": "invalid_credentials",
        "message": "Bearer token could not be verified.",
        "trace_id": "req_abc123",
    }}}


def error_json(
    status_code: int,
    error_type: str,
    code: str,
    message: str,
    trace_id: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    trace_id = trace_id or new_request_id()
    body = ErrorResponse(type=error_type, code=code, message=message, trace_id=trace_id)
    return JSONResponse(
        status_code=status_code,
        content={"error": body.model_dump(exclude_none=True)},
        headers=headers,
    )


def unauthorized_error(code: str, message: str, trace_id: str | None = None) -> JSONResponse:
    return error_json(
        401,
        "authentication_error",
        code,
        message,
        trace_id=trace_id,
        headers={"WWW-Authenticate": "Bearer"},
    )
