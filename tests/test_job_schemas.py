"""
Tests for the JobListing and JobQuery schemas.
"""

import pytest
from pydantic import ValidationError

from job_assistant.schemas.jobs import JobListing, JobQueryRequest


class TestJobListing:
    """Tests for JobListing parsing of store documents."""

    def test_ignores_store_id_and_extra_fields(self):
        listing = JobListing.model_validate({
            "_id": "65f0c0ffee",
            "title": "SRE",
            "company": "Initech",
            "location": "Gurgaon",
            "link": "https://jobs.example.com/sre",
            "posted_by": "hr@initech.example",
        })

        assert listing.title == "SRE"
        assert not hasattr(listing, "posted_by")

    def test_single_location_becomes_list(self):
        assert JobListing(location="Gurgaon").location == ["Gurgaon"]

    def test_location_list_is_stripped_and_cleaned(self):
        listing = JobListing(location=[" Gurgaon ", "", None, "Noida"])

        assert listing.location == ["Gurgaon", "Noida"]

    def test_missing_location_is_empty(self):
        assert JobListing().location == []

    def test_location_object_is_rejected(self):
        with pytest.raises(ValidationError):
            JobListing(location={"city": "Pune"})

    @pytest.mark.parametrize("salary", [1200000, 12.5, "12-15 LPA", None])
    def test_salary_accepts_numbers_text_and_none(self, salary):
        assert JobListing(salary=salary).salary == salary

    def test_numeric_title_is_coerced_to_text(self):
        assert JobListing(title=404).title == "404"


class TestJobQueryRequest:
    """Tests for JobQueryRequest."""

    def test_query_is_kept_verbatim(self):
        assert JobQueryRequest(query="  Jobs in Gurgaon  ").query == "  Jobs in Gurgaon  "

    def test_empty_query_rejected(self):
        with pytest.raises(ValidationError):
            JobQueryRequest(query="")
