"""
Shared response schemas - errors, health
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(description="Error type")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(default=None, description="Additional error details")
    path: Optional[str] = Field(default=None, description="Requested path, for unknown routes")
    timestamp: datetime = Field(default_factory=_now, description="Error timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "DuplicateUsername",
                "message": "Username already exists",
                "timestamp": "2025-09-13T17:23:45Z",
            }
        }
    )


class StatusResponse(BaseModel):
    """Liveness response served at the root path."""

    status: str = Field(default="ok")
    message: str = Field(default="Service is healthy")
    timestamp: datetime = Field(default_factory=_now)
    environment: str = Field(description="Environment name")


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=_now)
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {
                    "database": {
                        "status": "healthy",
                        "response_time_ms": 1.2,
                    }
                },
            }
        }
    )
