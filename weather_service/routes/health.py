"""Health check endpoints."""
from datetime import datetime, timezone
from typing import Dict, Any
from fastapi import APIRouter, Depends

from weather_service import __version__
from weather_service.config import settings
from weather_service.deps import get_database
from weather_service.storage.db import Database
from weather_service.app_logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/ping", operation_id="healthcheck")
async def ping() -> Dict[str, Any]:
    """Simple health check."""
    logger.debug("Health check requested")
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health")
def health(database: Database = Depends(get_database)) -> Dict[str, Any]:
    """Detailed health check."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "services": {
            "api": "healthy",
            "database": "unknown",
        },
    }

    if database.check_connection():
        health_status["services"]["database"] = "healthy"
    else:
        health_status["services"]["database"] = "unhealthy"
        health_status["status"] = "degraded"

    status_value = health_status["status"]
    logger.info(f"Health check completed - {status_value}")
    return health_status
