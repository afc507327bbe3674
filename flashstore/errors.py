"""Error taxonomy and exception handlers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class FlashError(Exception):
    """Base class for flash store errors."""


class InvalidMessageError(FlashError, ValueError):
    """A message item could not be stored (missing text, unknown type)."""


class InvalidPostedValueError(FlashError, ValueError):
    """A posted value has no safe string form."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        super().__init__(
            f"Posted value for {field!r} must be a scalar, got {type(value).__name__}"
        )


class SessionUnavailableError(FlashError, RuntimeError):
    """No session is bound to the current request."""


def register_exception_handlers(app: FastAPI) -> None:
    """Register application-wide exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle HTTP exceptions."""
        return JSONResponse(
            {"detail": exc.detail, "status_code": exc.status_code},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request validation errors."""
        context: dict[str, Any] = {
            "detail": "Unprocessable Entity",
            "errors": jsonable_encoder(exc.errors()),
        }
        return JSONResponse(context, status_code=422)

    @app.exception_handler(SessionUnavailableError)
    async def session_unavailable(request: Request, exc: SessionUnavailableError) -> JSONResponse:
        """A misconfigured app (no SessionMiddleware) is a server error."""
        logger.error("Session not available for %s", request.url.path, exc_info=exc)
        return JSONResponse({"detail": str(exc)}, status_code=500)

    @app.exception_handler(FlashError)
    async def flash_exception(request: Request, exc: FlashError) -> JSONResponse:
        """Reject flash data the store refused."""
        return JSONResponse({"detail": str(exc)}, status_code=400)

    @app.exception_handler(Exception)
    async def server_exception(request: Request, exc: Exception) -> JSONResponse:
        """Handle uncaught server exceptions."""
        logger.error("Unhandled exception", exc_info=exc)
        return JSONResponse({"detail": "Server error"}, status_code=500)
