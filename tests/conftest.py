"""
Pytest configuration for Job Opening Assistant tests.

Sets up the test environment and in-memory stand-ins for MongoDB and Gemini.
"""
import os
from typing import Any, Dict, List, Optional

import pytest

from job_assistant.exceptions import JobAssistantError
from job_assistant.schemas.jobs import JobListing
from job_assistant.services.job_query_service import JobQueryService

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("DB_NAME", "test-db")
os.environ.setdefault("COLLECTION_NAME", "jobs")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")


# =============================================================================
# IN-MEMORY FAKES
# =============================================================================

class FakeConnectionManager:
    """ConnectionManager that counts acquire/release calls."""

    def __init__(self, acquire_error: Optional[JobAssistantError] = None):
        self.acquire_error = acquire_error
        self.acquire_calls = 0
        self.release_calls = 0
        self.handle = object()

    def acquire(self) -> Any:
        self.acquire_calls += 1
        if self.acquire_error is not None:
            raise self.acquire_error
        return self.handle

    def release(self) -> None:
        self.release_calls += 1


class InMemoryJobRepository:
    """JobRepository serving a fixed list of listings."""

    def __init__(
        self,
        listings: Optional[List[JobListing]] = None,
        error: Optional[JobAssistantError] = None,
    ):
        self.listings = listings or []
        self.error = error
        self.filters: List[Optional[Dict[str, Any]]] = []

    def find_all(self, filter: Optional[Dict[str, Any]] = None) -> List[JobListing]:
        self.filters.append(filter)
        if self.error is not None:
            raise self.error
        return list(self.listings)


class FakeRecommendationClient:
    """RecommendationClient that records calls and returns a canned reply."""

    def __init__(self, reply: str = "", error: Optional[JobAssistantError] = None):
        self.reply = reply
        self.error = error
        self.calls: List[Dict[str, str]] = []

    def generate(self, context: str, query: str) -> str:
        self.calls.append({"context": context, "query": query})
        if self.error is not None:
            raise self.error
        return self.reply


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def gurgaon_listings() -> List[JobListing]:
    """Two listings: one with a salary, one without."""
    return [
        JobListing(
            title="Backend Engineer",
            company="Acme Corp",
            location=["Gurgaon", "Noida"],
            salary=1200000,
            link="https://jobs.example.com/backend-engineer",
        ),
        JobListing(
            title="Data Analyst",
            company="Globex",
            location="Bangalore",
            salary=None,
            link="https://jobs.example.com/data-analyst",
        ),
    ]


@pytest.fixture
def connection_manager() -> FakeConnectionManager:
    return FakeConnectionManager()


@pytest.fixture
def job_repository(gurgaon_listings) -> InMemoryJobRepository:
    return InMemoryJobRepository(listings=gurgaon_listings)


@pytest.fixture
def recommendation_client() -> FakeRecommendationClient:
    return FakeRecommendationClient(
        reply="Backend Engineer at Acme Corp is available in Gurgaon."
    )


@pytest.fixture
def job_query_service(connection_manager, job_repository, recommendation_client) -> JobQueryService:
    """JobQueryService wired entirely to in-memory fakes."""
    return JobQueryService(
        connection_manager=connection_manager,
        repository_factory=lambda handle: job_repository,
        recommendation_client=recommendation_client,
    )
