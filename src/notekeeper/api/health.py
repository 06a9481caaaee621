"""Health check API endpoints."""

from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..core.schemas.common import HealthCheckResponse, StatusResponse
from ..core.services import HealthService
from ..database import Database, get_database

router = APIRouter(tags=["health"])


@router.get("/", response_model=StatusResponse)
async def status_check(settings: Settings = Depends(get_settings)):
    """Service liveness."""
    return StatusResponse(environment=settings.environment)


@router.get("/api/health", response_model=HealthCheckResponse)
async def health_check(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
):
    """Overall health including database connectivity."""
    health_service = HealthService(database, settings)
    return await health_service.get_health_status()
