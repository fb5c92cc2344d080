"""Error Handlers - translate every handler failure into an HTTP response.

Invariants:
    - CLIENT_INPUT -> 400 {"message": ...}
    - NOT_FOUND -> 404 with empty body
    - UNEXPECTED -> 500 {"message": ...}
    - Nothing raised by a handler reaches the ASGI server unhandled

Design Decisions:
    - StoreError and RequestValidationError use FastAPI exception handlers
    - Everything else is caught by ErrorTranslatorMiddleware; a plain
      exception_handler(Exception) would re-raise after responding
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from store_api.core.errors import (
    ErrorKind, PayloadValidationError, StoreError, classify,
    format_validation_errors,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_store_error_handler(app)
    _register_validation_error_handler(app)
    app.add_middleware(ErrorTranslatorMiddleware)


def translate_error(request: Request, exc: Exception) -> Response:
    """Classify exc and build the matching response."""
    kind = classify(exc)
    message = getattr(exc, "message", None) or str(exc) or type(exc).__name__
    extra = {
        "path": request.url.path,
        "method": request.method,
        "error_kind": kind.value,
        "error_code": getattr(exc, "code", None),
    }
    match kind:
        case ErrorKind.CLIENT_INPUT:
            logger.warning(f"Client input error: {message}", extra=extra)
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"message": message},
            )
        case ErrorKind.NOT_FOUND:
            logger.info(f"Not found: {message}", extra=extra)
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        case ErrorKind.UNEXPECTED:
            logger.error(
                f"Unhandled exception on {request.url.path}: {message}",
                extra=extra, exc_info=exc,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": message},
            )


def _register_store_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        """Handle all Store API domain/infrastructure errors."""
        return translate_error(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Body, query and path validation failures become 400 with a message."""
        error = PayloadValidationError(format_validation_errors(exc.errors()))
        return translate_error(request, error)


class ErrorTranslatorMiddleware(BaseHTTPMiddleware):
    """Catch-all for exceptions no exception handler claimed."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return translate_error(request, exc)
