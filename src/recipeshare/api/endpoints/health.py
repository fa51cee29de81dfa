"""Health check endpoints.

Liveness and readiness probes for orchestrators and load balancers.
"""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel, Field

from recipeshare.observability.logging import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Health status", examples=["healthy"])
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")


class ReadinessResponse(HealthResponse):
    """Readiness check response with dependency status."""

    dependencies: dict[str, str] = Field(
        default_factory=dict,
        description="Status of external dependencies",
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
)
async def health_check(request: Request) -> HealthResponse:
    """Report that the process is up. Does not touch storage."""
    settings = request.app.state.settings
    return HealthResponse(
        status="healthy",
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    responses={503: {"description": "Storage is not ready"}},
)
async def readiness_check(request: Request, response: Response) -> ReadinessResponse:
    """Report whether recipe storage can serve requests.

    Answers 503 unless storage is healthy.
    """
    settings = request.app.state.settings
    service = getattr(request.app.state, "recipe_service", None)

    if service is None:
        storage = "not_initialized"
    else:
        try:
            storage = "healthy" if await service.is_healthy() else "unhealthy"
        except Exception:
            logger.exception("Storage readiness check failed")
            storage = "unhealthy"

    ready = storage == "healthy"
    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(
        status="ready" if ready else "degraded",
        version=settings.app.version,
        environment=settings.APP_ENV,
        dependencies={"storage": storage},
    )
