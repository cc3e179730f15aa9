"""
Global exception handlers for the FastAPI application.
Every error leaves the API as ``{"error": {"message", ..., "path"}}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any, Dict

from kappaplan.core.logging import get_logger

logger = get_logger(__name__)


class AppException(Exception):
    """Application error carrying its HTTP status and optional details."""
    def __init__(self, message: str, status_code: int = 500, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


def error_response(request: Request, code: int, message: Any, **fields: Any) -> JSONResponse:
    """Build the uniform error payload."""
    error: Dict[str, Any] = {"message": message}
    error.update(fields)
    error["path"] = request.url.path
    return JSONResponse(status_code=code, content={"error": error})


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.error(
        f"Application error: {exc.message}",
        extra={"status_code": exc.status_code, "path": request.url.path},
    )
    return error_response(request, exc.status_code, exc.message, details=exc.details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(
        f"HTTP {exc.status_code}: {exc.detail}",
        extra={"status_code": exc.status_code, "path": request.url.path},
    )
    return error_response(request, exc.status_code, exc.detail, status_code=exc.status_code)


def _jsonable(value: Any) -> Any:
    if isinstance(value, Exception):
        return str(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    return value


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation errors with their pydantic details."""
    errors = [_jsonable(error) for error in exc.errors()]
    logger.warning("Request validation failed", extra={"path": request.url.path})
    return error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation error",
        details=errors,
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors with their traceback."""
    logger.exception(
        f"Unhandled exception: {exc}",
        extra={"path": request.url.path, "exception_type": type(exc).__name__},
    )
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
