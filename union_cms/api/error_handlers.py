# This file defines consistent API error payloads and exception handlers.
# It exists so every endpoint returns the same `{success: false, message}` shape with trace fields.
# The handlers translate validation, HTTP, and unexpected failures into safe client messages.
# Centralized error handling prevents stack traces from leaking in production responses.

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Domain error type with structured API details."""

    def __init__(
        self,
        *,
        status_code: int,
        error_code: str,
        message: str,
        details: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidInputError(APIError):
    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(status_code=400, error_code="INVALID_INPUT", message=message, details=details)


class UnauthorizedError(APIError):
    def __init__(self, message: str = "Unauthorized. Please login first.") -> None:
        super().__init__(status_code=401, error_code="UNAUTHORIZED", message=message)


class ConflictError(APIError):
    def __init__(self, message: str) -> None:
        super().__init__(status_code=400, error_code="CONFLICT", message=message)


class NotFoundError(APIError):
    def __init__(self, message: str) -> None:
        super().__init__(status_code=404, error_code="NOT_FOUND", message=message)


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def _error_body(
    *, request: Request, error_code: str, message: str, details: Any | None = None
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "success": False,
        "message": message,
        "error_code": error_code,
        "request_id": _request_id(request),
    }
    if details is not None:
        body["details"] = jsonable_encoder(details)
    return body


def register_error_handlers(app: FastAPI, *, expose_internal_errors: bool = False) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                error_code=exc.error_code,
                message=exc.message,
                details=exc.details,
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=_error_body(
                request=request,
                error_code="INVALID_INPUT",
                message="Invalid request parameters.",
                details=exc.errors(),
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = str(exc.detail)
        if exc.status_code == 404 and request.url.path.startswith("/api/"):
            message = "API endpoint not found"
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                error_code="NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR",
                message=message,
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        message = str(exc) if expose_internal_errors and str(exc) else "Internal server error"
        return JSONResponse(
            status_code=500,
            content=_error_body(
                request=request,
                error_code="INTERNAL_ERROR",
                message=message,
            ),
        )
