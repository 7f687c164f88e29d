"""
Job listing retrieval from the MongoDB jobs collection.

The repository returns listings in the order the store yields them. It does
not sort, paginate or project; relevance matching is left to the model.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

from bson.errors import BSONError
from pydantic import ValidationError
from pymongo.database import Database
from pymongo.errors import PyMongoError

from job_assistant.exceptions import QueryError
from job_assistant.schemas.jobs import JobListing

logger = logging.getLogger(__name__)


class JobRepository(Protocol):
    """Reads job listings from one named collection."""

    def find_all(self, filter: Optional[Dict[str, Any]] = None) -> List[JobListing]:
        ...


def build_job_filter() -> Dict[str, Any]:
    """
    Build the MongoDB filter used for job queries.

    Every listing is returned; the model decides which ones match the
    user's question.
    """
    return {}


class MongoJobRepository:
    """JobRepository backed by a pymongo collection."""

    def __init__(self, database: Database, collection_name: Optional[str]):
        if not collection_name or not collection_name.strip():
            raise QueryError("COLLECTION_NAME environment variable is not set")

        self.collection_name = collection_name.strip()
        self._collection = database[self.collection_name]

    def find_all(self, filter: Optional[Dict[str, Any]] = None) -> List[JobListing]:
        """
        Fetch every listing matching ``filter`` (all listings when empty).

        Args:
            filter: MongoDB query document; None or {} means all records

        Returns:
            Listings in store order.

        Raises:
            QueryError: If the find call fails or a document is unreadable.
        """
        query = filter or build_job_filter()

        try:
            documents = list(self._collection.find(query))
        except (PyMongoError, BSONError) as e:
            logger.error(f"Error fetching jobs from collection '{self.collection_name}': {e}")
            raise QueryError("Failed to fetch job listings", cause=e) from e

        listings = []
        for idx, document in enumerate(documents):
            try:
                listings.append(JobListing.model_validate(document))
            except ValidationError as e:
                logger.error(
                    f"Job document {idx} (_id={document.get('_id')}) could not be read: {e}"
                )
                raise QueryError(f"Job document {idx} has an invalid shape", cause=e) from e

        logger.info(f"Fetched {len(listings)} job listings from '{self.collection_name}'")
        return listings
