"""
MongoDB connection lifecycle for the job query pipeline.

A ConnectionManager hands out one database handle per invocation and closes
it again afterwards. The orchestrator guarantees that release() runs on every
exit path once acquire() has succeeded.

Rules:
1. The connection target MUST use the mongodb:// or mongodb+srv:// scheme
2. Configuration problems are reported before any network I/O
3. release() never raises; close failures are logged and swallowed
"""

import logging
from typing import Any, Optional, Protocol

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConfigurationError as PyMongoConfigurationError
from pymongo.errors import InvalidURI, PyMongoError

from job_assistant.exceptions import ConfigurationError, StoreConnectionError

logger = logging.getLogger(__name__)

ACCEPTED_URI_SCHEMES = ("mongodb://", "mongodb+srv://")

# Fail fast on unreachable hosts instead of pymongo's 30s default
SERVER_SELECTION_TIMEOUT_MS = 10_000


class ConnectionManager(Protocol):
    """Owns the lifecycle of a connection handle to the document store."""

    def acquire(self) -> Any:
        ...

    def release(self) -> None:
        ...


def validate_mongodb_uri(uri: Optional[str]) -> str:
    """
    Check that a MongoDB connection target is present and well formed.

    Args:
        uri: Connection string from configuration

    Returns:
        The stripped connection string.

    Raises:
        ConfigurationError: If the URI is empty or uses an unsupported scheme.
    """
    if not uri or not uri.strip():
        raise ConfigurationError("MONGODB_URI environment variable is not set")

    uri = uri.strip()
    if not uri.startswith(ACCEPTED_URI_SCHEMES):
        raise ConfigurationError(
            'Invalid MongoDB URI format. URI must start with "mongodb://" or "mongodb+srv://"'
        )

    return uri


class MongoConnectionManager:
    """
    ConnectionManager backed by pymongo.

    Each acquire() creates a fresh MongoClient and verifies it with a ping,
    so a connection is never shared across invocations.
    """

    def __init__(
        self,
        uri: Optional[str],
        db_name: Optional[str],
        server_selection_timeout_ms: int = SERVER_SELECTION_TIMEOUT_MS,
    ):
        self._uri = uri
        self._db_name = db_name
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[MongoClient] = None

    def acquire(self) -> Database:
        """
        Connect to MongoDB and return the configured database handle.

        Raises:
            ConfigurationError: Missing/malformed URI or missing database name.
            StoreConnectionError: The server could not be reached.
        """
        uri = validate_mongodb_uri(self._uri)

        if not self._db_name or not self._db_name.strip():
            raise ConfigurationError("DB_NAME environment variable is not set")

        try:
            client: MongoClient = MongoClient(
                uri,
                serverSelectionTimeoutMS=self._server_selection_timeout_ms,
            )
        except (InvalidURI, PyMongoConfigurationError, ValueError, TypeError) as e:
            logger.error(f"MongoDB client configuration error: {e}")
            raise ConfigurationError("Invalid MongoDB connection string", cause=e) from e

        try:
            client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB connection error: {e}")
            client.close()
            raise StoreConnectionError("Could not connect to MongoDB", cause=e) from e

        self._client = client
        logger.info("Connected to MongoDB")

        return client[self._db_name.strip()]

    def release(self) -> None:
        """Close the current client. Never raises."""
        if self._client is None:
            return

        client, self._client = self._client, None
        try:
            client.close()
            logger.info("Disconnected from MongoDB")
        except Exception as e:
            logger.error(f"Error disconnecting from MongoDB: {e}")
