"""
Health check route for the travel recommender backend.

This endpoint is PUBLIC and provides a simple status check for the hosting
platform and uptime monitors. It never touches the completion provider.
"""

import logging

from fastapi import APIRouter

from travel_backend.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns a simple status indicator for monitoring.",
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
