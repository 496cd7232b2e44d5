"""
Health check routes.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text

from placementlog.core.database import get_db
from placementlog.core.logging import get_logger
from placementlog.schemas.base import BaseSchema, Envelope, ok

router = APIRouter(tags=["health"])
logger = get_logger(__name__)


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str
    timestamp: str
    checks: dict


@router.get("/health", response_model=Envelope[HealthResponse])
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Health check endpoint for monitoring.

    Reports "degraded" rather than failing when the database is unreachable.
    """
    checks = {}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = "healthy"
    except Exception as e:
        logger.warning("health_database_unreachable", exc_message=str(e))
        checks["database"] = "unhealthy"

    all_healthy = all(v == "healthy" for v in checks.values())

    return ok(HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks=checks,
    ))
