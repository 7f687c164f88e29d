"""
FastAPI routes for job recommendation endpoints.

Endpoints:
- POST /jobs/recommendations: Answer a natural-language job query

Each request builds its own JobQueryService, so every request opens and
closes its own MongoDB connection.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from job_assistant.config import Settings, get_settings
from job_assistant.exceptions import ConfigurationError
from job_assistant.schemas.jobs import JobQueryRequest, JobQueryResponse
from job_assistant.services.job_query_service import (
    JobQueryService,
    build_job_query_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/jobs",
    tags=["jobs"]
)

ERROR_STATUS_CODES = {
    "configuration": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "connection": status.HTTP_503_SERVICE_UNAVAILABLE,
    "query": status.HTTP_503_SERVICE_UNAVAILABLE,
    "external_service": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_job_query_service(settings: Settings = Depends(get_settings)) -> JobQueryService:
    """
    Dependency that wires a JobQueryService from the loaded settings.

    Raises:
        HTTPException 500: If required configuration is missing.
    """
    try:
        return build_job_query_service(settings)
    except ConfigurationError as e:
        logger.error(f"Job query service is not configured: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": e.kind,
                "details": e.message
            }
        )


@router.post(
    "/recommendations",
    response_model=JobQueryResponse,
    status_code=200,
    summary="Recommend job openings for a query",
    description="""
    Matches the user's question against every open job listing.

    **Flow:**
    1. Read all listings from the jobs collection
    2. If there are none, return NO_OPENINGS without calling the model
    3. Otherwise send the listings and the query to Gemini
    4. Return the model's recommendation text (status OK)

    **Errors:**
    - 500: configuration problem
    - 503: MongoDB or Gemini unavailable
    """
)
def recommend_jobs_endpoint(
    request: JobQueryRequest,
    service: JobQueryService = Depends(get_job_query_service)
) -> JobQueryResponse:
    logger.info(f"POST /jobs/recommendations called, query='{request.query[:50]}'")

    response = service.run(request.query)

    if response.status == "ERROR":
        raise HTTPException(
            status_code=ERROR_STATUS_CODES.get(
                response.error_kind, status.HTTP_500_INTERNAL_SERVER_ERROR
            ),
            detail={
                "error": response.error_kind,
                "details": response.message
            }
        )

    logger.info(f"Returning response with status={response.status}")
    return response
