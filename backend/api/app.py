"""
FastAPI application factory for the Live Board API service.

Creates the app with:
- Board route (/api/board)
- Middleware stack
- Health check endpoint
- Lifespan management (feed clients start/stop)
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from shared.config import get_settings
from shared.utils.logging import get_logger, setup_logging
from shared.utils.metrics import start_metrics_server

from api.board import BoardService
from api.dependencies import init_dependencies
from api.middleware import setup_middleware
from api.routes.board import router as board_router

logger = get_logger(__name__)


@asynccontextmanager
async def _noop_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """No-op lifespan for testing without upstream feeds."""
    yield


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Builds the feed connectors and board service on startup and closes
    their HTTP clients on shutdown.
    """
    settings = get_settings()
    setup_logging("api")
    start_metrics_server()

    board_service = BoardService.from_settings(settings)
    await board_service.start()
    init_dependencies(board_service)

    logger.info(
        "api_service_started",
        host=settings.api_host,
        port=settings.api_port,
        league=settings.apisports_league,
        odds_sport=settings.odds_sport,
    )

    yield

    await board_service.close()
    logger.info("api_service_stopped")


def create_app(*, use_lifespan: bool = True) -> FastAPI:
    """Create and configure the FastAPI application. Set use_lifespan=False for testing without feeds."""
    app = FastAPI(
        title="Live Board API",
        description="Live scores reconciled with betting odds",
        version="1.0.0",
        lifespan=lifespan if use_lifespan else _noop_lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    setup_middleware(app)

    app.include_router(board_router)

    @app.get("/health", tags=["system"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "service": "api"}

    return app


# For running with uvicorn directly
app = create_app()
