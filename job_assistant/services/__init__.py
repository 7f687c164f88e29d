"""
Service layer for the Job Opening Assistant.

Contains the job query pipeline and the components it sequences:
- JobRepository: reads listings from MongoDB
- Prompt composer: renders listings into the model context
- RecommendationClient: asks Gemini for a recommendation
- JobQueryService: runs one query end to end

Services act as the glue between the entry points (CLI, HTTP routes) and
the database/LLM clients.
"""

from .job_query_service import (
    NO_OPENINGS_MESSAGE,
    JobQueryService,
    PipelineState,
    build_job_query_service,
)
from .job_repository import JobRepository, MongoJobRepository, build_job_filter
from .prompt_composer import format_job_listing, render_job_context
from .recommendation_client import GeminiRecommendationClient, RecommendationClient

__all__ = [
    "NO_OPENINGS_MESSAGE",
    "JobQueryService",
    "PipelineState",
    "build_job_query_service",
    "JobRepository",
    "MongoJobRepository",
    "build_job_filter",
    "format_job_listing",
    "render_job_context",
    "GeminiRecommendationClient",
    "RecommendationClient",
]
