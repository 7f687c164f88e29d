"""
Error taxonomy for the job query pipeline.

Every failure raised by a pipeline component derives from JobAssistantError
and carries a short ``kind`` string. The orchestrator reports that kind back
to callers (CLI exit diagnostics, HTTP error details) once the store
connection has been released.

None of these errors are retried.
"""

from typing import Optional


class JobAssistantError(Exception):
    """
    Base class for pipeline failures.

    Attributes:
        message: Error description
        kind: Machine-friendly error category (e.g. 'configuration')
        cause: The underlying exception, if any
    """

    kind = "unknown"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause

        parts = [message]
        if cause is not None:
            parts.append(f"(caused by {type(cause).__name__}: {cause})")

        super().__init__(" ".join(parts))


class ConfigurationError(JobAssistantError, ValueError):
    """Required configuration is missing or malformed."""

    kind = "configuration"


class StoreConnectionError(JobAssistantError, ConnectionError):
    """The document store is unreachable or the handshake failed."""

    kind = "connection"


class QueryError(JobAssistantError):
    """Retrieving listings failed after a connection was established."""

    kind = "query"


class ExternalServiceError(JobAssistantError):
    """The language model call failed, timed out or returned nothing usable."""

    kind = "external_service"
