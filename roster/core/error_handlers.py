"""
Translate failures raised along the request path into the JSON error envelope.

Every handler logs the failure with its stack before answering, so nothing
reaches the client as raw text or a traceback.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from roster.core.errors import (
    EntityNotFoundError,
    NoPlayersAvailableError,
    StorageConstraintError,
    ValidationFailedError,
)
from roster.core.responses import UTF8JSONResponse

logger = logging.getLogger(__name__)

UNEXPECTED_DETAILS = "Unexpected error occurred"
CONSTRAINT_MESSAGE = "Database constraint violation"


def error_envelope(status: int, message: str, details: Any) -> UTF8JSONResponse:
    body = {
        "status": status,
        "message": message,
        "timestamp": datetime.now().isoformat(),
        "details": details,
    }
    return UTF8JSONResponse(jsonable_encoder(body), status_code=status)


def _field_name(loc: tuple | list) -> str:
    # ("body", "email") -> "email"; ("body", 1) -> "body" for JSON decode errors
    parts = list(loc or ())
    if not parts:
        return "request"
    last = parts[-1]
    return last if isinstance(last, str) else "body"


async def handle_not_found(request: Request, exc: EntityNotFoundError):
    logger.error("%s occurred: %s", type(exc).__name__, exc, exc_info=exc)
    return error_envelope(404, str(exc), exc.details)


async def handle_validation_failed(request: Request, exc: ValidationFailedError):
    logger.error("Validation failed for %s %s: %s", request.method, request.url.path, exc.errors, exc_info=exc)
    return error_envelope(400, "Validation failed", exc.errors)


async def handle_request_validation(request: Request, exc: RequestValidationError):
    details: dict[str, str] = {}
    for error in exc.errors():
        details.setdefault(_field_name(error.get("loc")), error.get("msg") or "Error occurred for this field")
    logger.error("Invalid request for %s %s: %s", request.method, request.url.path, details, exc_info=exc)
    return error_envelope(400, "Validation failed", details)


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    logger.error("HTTP %s for %s %s: %s", exc.status_code, request.method, request.url.path, exc.detail)
    response = error_envelope(exc.status_code, str(exc.detail), UNEXPECTED_DETAILS)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_storage_constraint(request: Request, exc: StorageConstraintError):
    logger.error("StorageConstraintError occurred: %s", exc, exc_info=exc)
    return error_envelope(409, CONSTRAINT_MESSAGE, CONSTRAINT_MESSAGE)


async def handle_unexpected(request: Request, exc: Exception):
    logger.error("Unexpected error occurred: %s", exc, exc_info=exc)
    return error_envelope(500, str(exc), UNEXPECTED_DETAILS)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EntityNotFoundError, handle_not_found)
    app.add_exception_handler(ValidationFailedError, handle_validation_failed)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StorageConstraintError, handle_storage_constraint)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(NoPlayersAvailableError, handle_unexpected)
    app.add_exception_handler(Exception, handle_unexpected)
