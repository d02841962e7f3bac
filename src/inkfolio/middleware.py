"""Request logging middleware and exception-to-response mapping."""

import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from .core.exceptions import AUTH_ERRORS, InkfolioException, StoreFailureError
from .schemas.common import ErrorResponse


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request.

    Headers are never logged, so bearer tokens stay out of the logs.
    """

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # Drop the "body"/"query"/"path" prefix from the location
    loc = [str(part) for part in first.get("loc", ())[1:]]
    field = ".".join(loc)
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


def register_exception_handlers(app: FastAPI) -> None:
    """Map application, validation and store errors to the JSON error envelope."""

    @app.exception_handler(InkfolioException)
    async def handle_app_exception(request: Request, exc: InkfolioException):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AUTH_ERRORS) else None
        return error_response(exc.status_code, exc.message, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.debug(f"Rejected {request.method} {request.url.path}: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_failure(request: Request, exc: SQLAlchemyError):
        logger.opt(exception=exc).error(
            f"Store failure on {request.method} {request.url.path}"
        )
        failure = StoreFailureError()
        return error_response(failure.status_code, failure.message)
