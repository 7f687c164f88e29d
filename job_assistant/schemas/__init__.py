"""
Pydantic schemas for job records and API request/response validation.
"""

from .health import HealthResponse
from .jobs import JobListing, JobQueryRequest, JobQueryResponse

__all__ = [
    "HealthResponse",
    "JobListing",
    "JobQueryRequest",
    "JobQueryResponse",
]
