"""Health check endpoint."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from adapter.postgres.user_repository import PostgresUserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(request: Request):
    """Health check endpoint with database status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    pool = getattr(request.app.state, "db_pool", None)
    if pool is not None and await PostgresUserRepository(pool).ping():
        health_status["services"]["postgres"] = {
            "status": "healthy",
            "message": "Connection successful"
        }
        status_code = status.HTTP_200_OK
    else:
        health_status["services"]["postgres"] = {
            "status": "unhealthy",
            "message": "Connection failed or not configured"
        }
        health_status["status"] = "degraded"
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(
        content=health_status,
        status_code=status_code
    )
