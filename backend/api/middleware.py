"""
API middleware stack.

Every request gets an id (X-Request-ID) that is bound into the structlog
context, so feed and merge logs emitted while serving it carry the same
request_id. Unhandled errors on the board endpoint still answer with the
board error body.
"""
from __future__ import annotations

import time
import uuid

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from shared.config import get_settings
from shared.utils.logging import get_logger

from api.routes.board import BOARD_ERROR_FALLBACK, board_error_response, router as board_router

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
BOARD_PATH = f"{board_router.prefix}/board"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns the request id, binds it for logging and logs the request outcome."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:16]
        request.state.request_id = request_id
        path = request.url.path
        start = time.monotonic()

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.error(
                    "http_request_error",
                    method=request.method,
                    path=path,
                    duration_ms=round((time.monotonic() - start) * 1000, 2),
                    error=str(exc),
                )
                raise

            # Health checks are polled constantly
            if path != "/health":
                logger.info(
                    "http_request",
                    method=request.method,
                    path=path,
                    status=response.status_code,
                    duration_ms=round((time.monotonic() - start) * 1000, 2),
                )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the catch-all handler."""

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        request_id = getattr(request.state, "request_id", "unknown")
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            error=str(exc),
            request_id=request_id,
            exc_info=True,
        )
        if request.url.path == BOARD_PATH:
            return board_error_response(BOARD_ERROR_FALLBACK)
        return JSONResponse(
            status_code=500,
            content={"error": "internal_server_error", "request_id": request_id},
        )


def setup_middleware(app: FastAPI) -> None:
    """Install CORS (read-only board), request context and the error handler."""
    settings = get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestContextMiddleware)
    setup_exception_handlers(app)
