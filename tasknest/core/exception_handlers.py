"""HTTP error mapping.

Every error response has the body {error, message, details}. Domain errors
get their status from STATUS_BY_ERROR_CODE; anything unrecognised is a 500
with a generic message (the exception is logged, not returned).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasknest.core.config import get_settings
from tasknest.domain.exceptions import TaskNestException

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "INVALID_IDENTIFIER": 400,
    "VALIDATION_ERROR": 400,
    "AUTHENTICATION_ERROR": 401,
    "RESOURCE_NOT_FOUND": 404,
    "CONFLICT": 409,
    "INTERNAL_ERROR": 500,
}


def _error_response(
    status_code: int,
    error: str,
    message: Any,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "details": details or {}},
        headers=headers,
    )


async def handle_tasknest_exception(
    request: Request, exc: TaskNestException
) -> JSONResponse:
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, 400)
    if status_code >= 500:
        logger.error(
            "%s on %s %s", exc.error_code, request.method, request.url.path
        )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request shape (bad JSON, wrong query type): 422."""
    return _error_response(
        422,
        "VALIDATION_ERROR",
        "Request validation failed",
        jsonable_encoder(exc.errors()),
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _error_response(
        exc.status_code,
        "HTTP_ERROR",
        exc.detail,
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled %s on %s %s", type(exc).__name__, request.method, request.url.path
    )
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above on app (call once from create_app)."""
    app.add_exception_handler(TaskNestException, handle_tasknest_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
