"""Health service implementation."""

import time
from typing import Any, Dict, Optional

from ...config import Settings, get_settings
from ...database import Database
from ..logging import get_logger
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService

logger = get_logger("services.health")


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, database: Database, settings: Optional[Settings] = None):
        self.database = database
        self.settings = settings or get_settings()

    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        db_health = await self.check_database_health()

        return HealthCheckResponse(
            status="healthy" if db_health["connected"] else "unhealthy",
            version=self.settings.app_version,
            checks={"database": db_health},
        )

    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        start = time.perf_counter()
        try:
            await self.database.ping()
        except Exception:
            logger.exception("Database health check failed")
            return {
                "connected": False,
                "status": "unhealthy",
                "response_time_ms": None,
            }

        return {
            "connected": True,
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - start) * 1000, 2),
        }
