"""Custom exceptions and centralized FastAPI error handlers."""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ExplorerError(Exception):
    """Base exception with HTTP status code and optional detail."""

    def __init__(self, message: str, status_code: int = 500, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    def to_body(self) -> dict:
        body: dict[str, Any] = {"error": str(self)}
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class UpstreamError(ExplorerError):
    """Upstream call failed after all attempts."""

    def __init__(self, message: str, detail: Any = None):
        super().__init__(message, status_code=500, detail=detail)


class MissingParameterError(ExplorerError):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(ExplorerError)
    async def handle_explorer_error(_request: Request, exc: ExplorerError):
        return JSONResponse(exc.to_body(), status_code=exc.status_code)

    @app.exception_handler(ValueError)
    async def handle_value_error(_request: Request, exc: ValueError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse({"error": "not found"}, status_code=404)
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "server error", "detail": str(exc) or None},
            status_code=500,
        )
