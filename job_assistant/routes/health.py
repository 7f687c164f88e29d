"""
Health check route for the Job Opening Assistant.

This endpoint is public and does not touch MongoDB or Gemini, so it stays
green even when the downstream services are unavailable.
"""

import logging

from fastapi import APIRouter

from job_assistant.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint. "
        "Returns a simple status indicator for monitoring and load balancing."
    ),
    status_code=200,
    tags=["system"],
)
def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
