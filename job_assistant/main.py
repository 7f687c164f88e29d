"""
FastAPI application entry point for the Job Opening Assistant.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from job_assistant import __version__
from job_assistant.config import get_settings
from job_assistant.routes.health import router as health_router
from job_assistant.routes.jobs import router as jobs_router
from job_assistant.utils.logging import configure_logging

configure_logging(get_settings().LOG_LEVEL)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS env var
    - anything else: Allows all origins for local development

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    settings = get_settings()

    if settings.is_production():
        cors_origins = os.getenv("CORS_ALLOWED_ORIGINS", "")
        if cors_origins:
            origins = [origin.strip() for origin in cors_origins.split(",")]
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
            return origins

        logger.warning(
            "CORS_ALLOWED_ORIGINS not set in production. "
            "No web origins allowed. Set CORS_ALLOWED_ORIGINS for web clients."
        )
        return []

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="Job Opening Assistant API",
    description="Recommends open job listings for natural-language queries",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log detailed validation errors for debugging."""
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": jsonable_encoder(exc.errors()),
        }
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(jobs_router)

logger.info("FastAPI app initialized successfully")
