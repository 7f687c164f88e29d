"""
Pydantic schemas for job listings and job query endpoints.

JobListing is the typed view of one document from the jobs collection.
JobQueryRequest / JobQueryResponse are the request/response contracts shared
by the HTTP endpoint and the CLI.
"""

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ============================================================================
# STORE RECORDS
# ============================================================================

class JobListing(BaseModel):
    """
    One job opening as stored in MongoDB.

    Store-assigned fields such as ``_id`` are ignored. Listings are read-only
    within a request.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: Optional[str] = Field(None, description="Job title")
    company: Optional[str] = Field(None, description="Hiring company")
    location: List[str] = Field(
        default_factory=list,
        description="One or more place names (a single string is accepted)",
        examples=[["Gurgaon"], ["Gurgaon", "Noida", "Bangalore"]]
    )
    salary: Optional[Union[int, float, str]] = Field(
        None,
        description="Salary as a number or free text; absent when not disclosed",
        examples=[1200000, "12-15 LPA"]
    )
    link: Optional[str] = Field(None, description="Application URL")

    @field_validator("location", mode="before")
    @classmethod
    def normalize_location(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, dict):
            raise ValueError("location must be a place name or a list of place names")
        if isinstance(value, (list, tuple)):
            items = value
        else:
            items = [value]
        return [str(item).strip() for item in items if item is not None and str(item).strip()]

    @field_validator("salary", mode="before")
    @classmethod
    def coerce_salary(cls, value: Any) -> Optional[Union[int, float, str]]:
        # BSON Decimal128 and similar store types arrive as objects
        if value is None or isinstance(value, (int, float, str)):
            return value
        return str(value)

    @field_validator("title", "company", "link", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)


# ============================================================================
# REQUEST MODELS
# ============================================================================

class JobQueryRequest(BaseModel):
    """Request to find job openings that match a natural-language query."""

    query: str = Field(
        ...,
        description="User's natural language question about job openings",
        min_length=1,
        max_length=1000,
        examples=["jobs in gurgaon", "remote python roles paying over 20 LPA"]
    )


# ============================================================================
# RESPONSE MODELS
# ============================================================================

ErrorKind = Literal["configuration", "connection", "query", "external_service"]


class JobQueryResponse(BaseModel):
    """
    Outcome of one job query invocation.

    - OK: the model produced a recommendation
    - NO_OPENINGS: the collection is empty; the model was not called
    - ERROR: a pipeline step failed; error_kind names the failing category
    """

    status: Literal["OK", "NO_OPENINGS", "ERROR"]
    recommendation: Optional[str] = Field(
        None,
        description="Recommendation text returned by the model (status OK only)"
    )
    message: Optional[str] = Field(
        None,
        description="Human-readable summary for NO_OPENINGS and ERROR"
    )
    error_kind: Optional[ErrorKind] = None
    listings_considered: int = Field(
        0,
        ge=0,
        description="Number of listings rendered into the model context"
    )
