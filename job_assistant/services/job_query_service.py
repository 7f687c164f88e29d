"""
Job Query Service - one query, end to end

Sequences the pipeline for a single user query:

    IDLE -> CONNECTING -> FETCHING -> (EMPTY | COMPOSING -> GENERATING)
         -> DISCONNECTING -> DONE

FAILED is reachable from CONNECTING, FETCHING and GENERATING. Whenever a
connection was acquired, DISCONNECTING runs before the outcome is reported,
exactly once.

Each step returns ``(value, error)`` instead of raising, so run() is a flat
list of checks. Failures come back as a JobQueryResponse with status ERROR;
there are no partial results.
"""

import logging
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from job_assistant.config import Settings
from job_assistant.db.client import ConnectionManager, MongoConnectionManager
from job_assistant.exceptions import JobAssistantError
from job_assistant.schemas.jobs import JobListing, JobQueryResponse
from job_assistant.services.job_repository import (
    JobRepository,
    MongoJobRepository,
    build_job_filter,
)
from job_assistant.services.prompt_composer import render_job_context
from job_assistant.services.recommendation_client import (
    GeminiRecommendationClient,
    RecommendationClient,
)

logger = logging.getLogger(__name__)

NO_OPENINGS_MESSAGE = "No job openings found."

T = TypeVar("T")

# Builds a repository on top of the handle returned by ConnectionManager.acquire()
RepositoryFactory = Callable[[Any], JobRepository]


class PipelineState(str, Enum):
    IDLE = "IDLE"
    CONNECTING = "CONNECTING"
    FETCHING = "FETCHING"
    EMPTY = "EMPTY"
    COMPOSING = "COMPOSING"
    GENERATING = "GENERATING"
    DISCONNECTING = "DISCONNECTING"
    DONE = "DONE"
    FAILED = "FAILED"


class JobQueryService:
    """Runs the job query pipeline for one query at a time."""

    def __init__(
        self,
        connection_manager: ConnectionManager,
        repository_factory: RepositoryFactory,
        recommendation_client: RecommendationClient,
    ):
        self._connections = connection_manager
        self._repository_factory = repository_factory
        self._recommendations = recommendation_client
        self.state = PipelineState.IDLE

    def _transition(self, state: PipelineState) -> None:
        logger.debug(f"Job query pipeline: {self.state.value} -> {state.value}")
        self.state = state

    def _attempt(
        self, state: PipelineState, step: Callable[..., T], *args: Any
    ) -> Tuple[Optional[T], Optional[JobAssistantError]]:
        """Enter ``state`` and run ``step``, returning (value, error)."""
        self._transition(state)
        try:
            return step(*args), None
        except JobAssistantError as e:
            logger.error(f"Job query failed during {state.value}: {e}")
            return None, e

    def _fetch(self, handle: Any) -> List[JobListing]:
        repository = self._repository_factory(handle)
        return repository.find_all(build_job_filter())

    def _error_response(self, error: JobAssistantError) -> JobQueryResponse:
        return JobQueryResponse(
            status="ERROR",
            message=error.message,
            error_kind=error.kind,
        )

    def _query(self, handle: Any, query: str) -> JobQueryResponse:
        listings, error = self._attempt(PipelineState.FETCHING, self._fetch, handle)
        if error is not None:
            return self._error_response(error)

        if not listings:
            self._transition(PipelineState.EMPTY)
            logger.info(NO_OPENINGS_MESSAGE)
            return JobQueryResponse(status="NO_OPENINGS", message=NO_OPENINGS_MESSAGE)

        self._transition(PipelineState.COMPOSING)
        context = render_job_context(listings)

        text, error = self._attempt(
            PipelineState.GENERATING, self._recommendations.generate, context, query
        )
        if error is not None:
            return self._error_response(error)

        return JobQueryResponse(
            status="OK",
            recommendation=text,
            listings_considered=len(listings),
        )

    def run(self, query: str) -> JobQueryResponse:
        """
        Answer one job query.

        Args:
            query: The user's question, passed to the model unmodified

        Returns:
            JobQueryResponse with status OK, NO_OPENINGS or ERROR.
        """
        self.state = PipelineState.IDLE
        logger.info(f"Job query started: query='{query[:50]}'")

        handle, error = self._attempt(PipelineState.CONNECTING, self._connections.acquire)
        if error is not None:
            self._transition(PipelineState.FAILED)
            return self._error_response(error)

        outcome: Optional[JobQueryResponse] = None
        try:
            outcome = self._query(handle, query)
        finally:
            self._transition(PipelineState.DISCONNECTING)
            self._connections.release()
            succeeded = outcome is not None and outcome.status != "ERROR"
            self._transition(PipelineState.DONE if succeeded else PipelineState.FAILED)

        logger.info(f"Job query finished with status={outcome.status}")
        return outcome


def build_job_query_service(settings: Settings) -> JobQueryService:
    """
    Wire the MongoDB and Gemini implementations from validated settings.

    No network call happens here: the connection is opened by run().

    Raises:
        ConfigurationError: If a required setting is missing.
    """
    settings.validate()

    return JobQueryService(
        connection_manager=MongoConnectionManager(settings.MONGODB_URI, settings.DB_NAME),
        repository_factory=lambda database: MongoJobRepository(
            database, settings.COLLECTION_NAME
        ),
        recommendation_client=GeminiRecommendationClient(settings.GOOGLE_API_KEY),
    )
