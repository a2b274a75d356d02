"""Health endpoints for the portal's process, database and file storage."""

import os
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from src.config import settings

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    """Service identity and status."""

    status: str
    app_name: str
    timestamp: datetime
    version: str
    environment: str


class LivenessResponse(BaseModel):
    """Process is up."""

    status: str


class ReadinessResponse(BaseModel):
    """Per-dependency readiness."""

    status: str
    checks: dict[str, str]


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        app_name=settings.app_name,
        timestamp=datetime.now(UTC),
        version=settings.app_version,
        environment=settings.app_env,
    )


@router.get("/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Liveness check."""
    return LivenessResponse(status="alive")


@router.get("/ready", response_model=ReadinessResponse)
async def readiness(request: Request) -> ReadinessResponse:
    """Readiness check.

    Checks:
    - Database answers ``SELECT 1``
    - Minutes storage directory exists and is writable
    """
    checks: dict[str, str] = {"api": "ok"}

    db = getattr(request.app.state, "db", None)
    if db:
        checks["database"] = "ok" if await db.is_healthy() else "failed"
    else:
        checks["database"] = "not_configured"

    storage = getattr(request.app.state, "minutes_storage", None)
    if storage:
        root = storage.root
        writable = root.is_dir() and os.access(root, os.W_OK)
        checks["storage"] = "ok" if writable else "failed"
    else:
        checks["storage"] = "not_configured"

    status = "ready" if all(v == "ok" for v in checks.values()) else "not_ready"
    return ReadinessResponse(status=status, checks=checks)
