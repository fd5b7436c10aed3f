"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.

    /health  → process is up (no dependencies touched)
    /ready   → database reachable; cache reported but never blocks readiness
    /live    → liveness probe
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ticketing_api.api.dependencies import Cache, DbSession
from ticketing_api.config.settings import settings
from ticketing_api.shared.core.logging import logger
from ticketing_api.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check(db: DbSession, cache: Cache):
    """
    Readiness check for Kubernetes/load balancers.

    503 when the database can't answer SELECT 1. Redis being down only
    degrades caching, so it is reported without failing the check.
    """
    try:
        await db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error("Readiness check failed", error=str(e))
        database = "unavailable"

    body = {
        "status": "ready" if database == "ok" else "not_ready",
        "database": database,
        "cache": "ok" if await cache.ping() else "unavailable",
    }
    return JSONResponse(status_code=200 if database == "ok" else 503, content=body)


@router.get("/live")
async def liveness_check():
    """
    Liveness check for Kubernetes.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
