from __future__ import annotations

import logging
from typing import Any, cast

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from restaurant.api.middleware.request_id import get_request_id
from restaurant.application.metrics.order_lifecycle import record_repository_error
from restaurant.application.ports.repositories import RepositoryError, StorageErrorKind

logger = logging.getLogger(__name__)

# Constraint failures only arise from orders referencing an unknown menu item.
_REPOSITORY_ERRORS: dict[StorageErrorKind, tuple[int, str, str]] = {
    StorageErrorKind.CONSTRAINT: (500, "INVALID_MENU_ITEM", "This menu item doesn't exist."),
    StorageErrorKind.CONNECTION_FAILURE: (500, "STORAGE_UNAVAILABLE", "storage unavailable"),
}


def _error_response(
    *,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            },
            "requestId": get_request_id(),
        },
    )


async def _repository_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    repository_exc = cast(RepositoryError, exc)
    status_code, code, message = _REPOSITORY_ERRORS[repository_exc.kind]
    record_repository_error(repository_exc.kind.value)
    logger.error(
        "repository_error",
        exc_info=repository_exc,
        extra={
            "kind": repository_exc.kind.value,
            "method": request.method,
            "path": request.url.path,
        },
    )
    return _error_response(status_code=status_code, code=code, message=message)


async def _http_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    http_exc = cast(StarletteHTTPException, exc)
    message = str(http_exc.detail) if http_exc.detail else "request failed"
    code = "HTTP_ERROR"
    if http_exc.status_code == 404:
        code = "NOT_FOUND"
    elif http_exc.status_code == 400:
        code = "BAD_REQUEST"
    elif http_exc.status_code == 405:
        code = "METHOD_NOT_ALLOWED"
    return _error_response(
        status_code=http_exc.status_code,
        code=code,
        message=message,
    )


async def _validation_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    validation_exc = cast(RequestValidationError, exc)
    return _error_response(
        status_code=400,
        code="INVALID_REQUEST",
        message="request validation failed",
        details={"errors": validation_exc.errors()},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RepositoryError, _repository_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
