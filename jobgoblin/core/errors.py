from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base for errors that map onto a single JSON error response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AuthError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class PayloadTooLarge(ValidationFailed):
    status_code = 413


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamError(ApiError):
    """A hosted dependency failed. The message is safe to show to clients."""

    def __init__(self, message: str, *, code: str = "upstream_failed", status_code: int | None = None):
        super().__init__(message, status_code=status_code)
        self.code = code


class ExtractionError(UpstreamError):
    def __init__(self, message: str = "Failed to extract resume text.", *, code: str = "extraction_failed"):
        super().__init__(message, code=code)


class ModelError(UpstreamError):
    def __init__(self, message: str = "Failed to generate tailored resume.", *, code: str = "model_failed"):
        super().__init__(message, code=code)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning("api_error path=%s status=%s: %s", request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def _http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    _ = request
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in {"body", "query", "form"}]
    field = ".".join(location)
    detail = str(first.get("msg") or "Invalid value")
    return f"{field}: {detail}" if field else detail


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    _ = request
    return error_response(status.HTTP_400_BAD_REQUEST, _validation_message(exc))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error path=%s: %s", request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(HTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
