# portfolio/responses.py
"""Uniform JSON envelope for every endpoint.

Success: ``{"success": true, "data": ..., "message"?: ..., "pagination"?: ...}``
Failure: ``{"success": false, "error": ..., "details"?: [...]}``
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.schemas.common import Pagination

logger = logging.getLogger("portfolio.api")

VALIDATION_ERROR = "Validation error"

# location prefixes FastAPI puts in front of field paths
_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def ok(
    data: Any = None,
    *,
    message: Optional[str] = None,
    pagination: Optional[Pagination] = None,
    status_code: int = 200,
    **extra: Any,
) -> JSONResponse:
    payload: dict[str, Any] = {"success": True}
    if data is not None:
        payload["data"] = data
    if message is not None:
        payload["message"] = message
    if pagination is not None:
        payload["pagination"] = pagination
    payload.update({key: value for key, value in extra.items() if value is not None})
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload, by_alias=True))


def fail(status_code: int, error: str, details: Optional[list] = None, headers=None) -> JSONResponse:
    payload: dict[str, Any] = {"success": False, "error": error}
    if details is not None:
        payload["details"] = details
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload), headers=headers)


def validation_details(errors) -> list[dict[str, Any]]:
    details = []
    for err in errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _LOCATIONS:
            loc = loc[1:]
        message = err.get("msg", "Invalid value")
        # pydantic prefixes messages raised from our validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({"path": loc, "message": message})
    return details


# ---------------- EXCEPTION HANDLERS ----------------
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return fail(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = validation_details(exc.errors())
    logger.info("validation_failed", extra={"path": request.url.path, "issues": len(details)})
    return fail(400, VALIDATION_ERROR, details)


def install_exception_handlers(app) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
