"""
Health Check Endpoints - Application health and status monitoring.
"""

from fastapi import APIRouter, Depends
from datetime import datetime, timezone

from repodoc.core.dependencies import AppContext, get_context
from repodoc.models.responses import HealthResponse


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check if the API is running and healthy"
)
async def health_check(
    context: AppContext = Depends(get_context)
) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with status and version info
    """
    settings = context.settings
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc)
    )


@router.get(
    "/ready",
    summary="Readiness Check",
    description="Check if the API is ready to accept requests"
)
async def readiness_check(
    context: AppContext = Depends(get_context)
) -> dict:
    """
    Readiness check for container orchestration.

    Reports whether the external credentials are configured.
    """
    settings = context.settings
    checks = {
        "api": True,
        "llm_configured": bool(settings.google_ai_api_key),
        "github_oauth_configured": bool(
            settings.github_client_id and settings.github_client_secret
        ),
    }

    return {
        "ready": all(checks.values()),
        "checks": checks,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get(
    "/live",
    summary="Liveness Check",
    description="Simple liveness probe"
)
async def liveness_check() -> dict:
    """Just returns OK if the server is running."""
    return {"status": "alive"}
