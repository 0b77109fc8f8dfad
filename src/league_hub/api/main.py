"""
FastAPI application for the League Hub API.

Serves season stat lines, standings, the weekly schedule and the playoff
picture computed from a league export. Responses are serialized with msgspec and computed views are
kept in a per-app TTL cache.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Optional

import msgspec
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from ..core.config import get_settings
from ..core.errors import InvalidStatEntryError, SnapshotLoadError
from ..snapshot import LeagueSnapshot
from .cache import SimpleCache
from .errors import APIError, api_error_handler, invalid_stat_entry_handler, snapshot_load_handler
from .routers import playoffs, schedule, standings, stats

logger = logging.getLogger(__name__)


class MSGSpecResponse(Response):
    """Custom response class using msgspec for JSON serialization."""

    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        if content is None:
            return b""
        return msgspec.json.encode(content)


def create_app(snapshot: Optional[LeagueSnapshot] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        snapshot: League data to serve. When None, the export at
            `settings.export_path` is loaded on the first request.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Season stats, standings and playoff picture for a football league export",
        version=settings.app_version,
        default_response_class=MSGSpecResponse,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.snapshot = snapshot
    app.state.cache = SimpleCache(default_ttl=settings.cache_ttl, enabled=settings.cache_enabled)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = (time.time() - start_time) * 1000
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"
        return response

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(InvalidStatEntryError, invalid_stat_entry_handler)
    app.add_exception_handler(SnapshotLoadError, snapshot_load_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with consistent format."""
        logger.error("Unhandled exception: %s", exc, exc_info=True)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An internal error occurred",
                    "detail": str(exc) if settings.show_error_detail else None,
                }
            },
        )

    @app.get("/health", tags=["health"])
    async def health_check(request: Request):
        """Basic health check with cache stats."""
        return {
            "status": "healthy",
            "snapshotLoaded": request.app.state.snapshot is not None,
            "cache": request.app.state.cache.get_stats(),
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        }

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
        }

    prefix = settings.api_prefix
    app.include_router(stats.router, prefix=f"{prefix}/stats", tags=["stats"])
    app.include_router(standings.router, prefix=f"{prefix}/standings", tags=["standings"])
    app.include_router(playoffs.router, prefix=f"{prefix}/playoffs", tags=["playoffs"])
    app.include_router(schedule.router, prefix=f"{prefix}/schedule", tags=["schedule"])

    return app
