"""
Tests for rendering job listings into the model context.

These tests verify:
- One block per listing, in input order
- All five fields present in every block
- Salary placeholder when absent
- Location joining for single and multiple places
"""

from job_assistant.schemas.jobs import JobListing
from job_assistant.services.prompt_composer import (
    BLOCK_SEPARATOR,
    NOT_SPECIFIED,
    format_job_listing,
    format_location,
    format_salary,
    render_job_context,
)


class TestFormatJobListing:
    """Tests for format_job_listing."""

    def test_block_contains_all_fields(self):
        listing = JobListing(
            title="Backend Engineer",
            company="Acme Corp",
            location=["Gurgaon"],
            salary=1200000,
            link="https://jobs.example.com/1",
        )

        block = format_job_listing(listing)

        assert block == (
            "Job Title: Backend Engineer\n"
            "Company: Acme Corp\n"
            "Location: Gurgaon\n"
            "Salary: 1200000\n"
            "Apply Here: https://jobs.example.com/1\n"
            "-------------------\n"
        )

    def test_missing_salary_renders_placeholder(self):
        listing = JobListing(title="Analyst", company="Globex", location="Pune", link="x")

        block = format_job_listing(listing)

        assert "Salary: Not specified" in block

    def test_missing_title_is_never_blank(self):
        """Unvalidated fields still render something readable."""
        listing = JobListing(company="Globex", location="Pune", link="x")

        block = format_job_listing(listing)

        assert f"Job Title: {NOT_SPECIFIED}" in block


class TestFieldFormatting:
    """Tests for format_location and format_salary."""

    def test_multiple_locations_joined_with_comma(self):
        assert format_location(["Gurgaon", "Noida", "Delhi"]) == "Gurgaon, Noida, Delhi"

    def test_single_location_has_no_separator(self):
        result = format_location(["Gurgaon"])

        assert result == "Gurgaon"
        assert "," not in result

    def test_no_location_renders_placeholder(self):
        assert format_location([]) == NOT_SPECIFIED

    def test_integral_float_salary_drops_decimal(self):
        assert format_salary(1200000.0) == "1200000"

    def test_fractional_salary_kept(self):
        assert format_salary(12.5) == "12.5"

    def test_text_salary_kept(self):
        assert format_salary("12-15 LPA") == "12-15 LPA"

    def test_blank_text_salary_renders_placeholder(self):
        assert format_salary("   ") == NOT_SPECIFIED

    def test_zero_salary_is_a_value(self):
        assert format_salary(0) == "0"


class TestRenderJobContext:
    """Tests for render_job_context."""

    def test_one_block_per_listing_in_order(self, gurgaon_listings):
        context = render_job_context(gurgaon_listings)

        assert context.count(BLOCK_SEPARATOR) == 2
        assert context.count("Job Title:") == 2
        assert context.index("Backend Engineer") < context.index("Data Analyst")

    def test_order_is_preserved_not_sorted(self):
        listings = [
            JobListing(title=title, company="C", location="X", link="l")
            for title in ["Zeta", "Alpha", "Mu"]
        ]

        context = render_job_context(listings)

        positions = [context.index(f"Job Title: {t}") for t in ["Zeta", "Alpha", "Mu"]]
        assert positions == sorted(positions)

    def test_duplicates_are_not_removed(self):
        listing = JobListing(title="Same", company="C", location="X", link="l")

        context = render_job_context([listing, listing])

        assert context.count("Job Title: Same") == 2

    def test_salary_and_placeholder_per_listing(self, gurgaon_listings):
        context = render_job_context(gurgaon_listings)

        assert "Salary: 1200000" in context
        assert "Salary: Not specified" in context
        assert "Location: Gurgaon, Noida" in context
        assert "Location: Bangalore\n" in context

    def test_rendering_is_deterministic(self, gurgaon_listings):
        assert render_job_context(gurgaon_listings) == render_job_context(gurgaon_listings)

    def test_empty_input_renders_empty_string(self):
        assert render_job_context([]) == ""
