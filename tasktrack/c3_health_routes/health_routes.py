"""Liveness and readiness routes for tasktrack."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from tasktrack import __version__

logger = logging.getLogger(__name__)


def create_health_router(server_state) -> APIRouter:
    """Create the root banner and database-backed health routes."""
    router = APIRouter(tags=["health"])

    @router.get("/", response_class=PlainTextResponse)
    def root():
        return "Task Management API is running"

    @router.get("/health")
    def health_check():
        """Report whether the store answers, with 503 when it does not."""
        database_ok = server_state.db_manager.ping()
        body = {
            "status": "healthy" if database_ok else "degraded",
            "database": "ok" if database_ok else "unreachable",
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "version": __version__,
        }
        return JSONResponse(status_code=200 if database_ok else 503, content=body)

    return router
