"""
Rendering of job listings into the text context sent to the model.

Every listing becomes one fixed-shape block and blocks keep the order the
store returned them in. Nothing is filtered, sorted or deduplicated here.
"""

from typing import Optional, Sequence, Union

from job_assistant.schemas.jobs import JobListing

NOT_SPECIFIED = "Not specified"
LOCATION_SEPARATOR = ", "
BLOCK_SEPARATOR = "-------------------"

JOB_LISTING_TEXT_FORMAT = """Job Title: {title}
Company: {company}
Location: {location}
Salary: {salary}
Apply Here: {link}
{separator}
"""


def _text_or_placeholder(value: Optional[str]) -> str:
    if value is None or not value.strip():
        return NOT_SPECIFIED
    return value.strip()


def format_location(locations: Sequence[str]) -> str:
    """Join one or more place names into a human-readable list."""
    if not locations:
        return NOT_SPECIFIED
    return LOCATION_SEPARATOR.join(locations)


def format_salary(salary: Optional[Union[int, float, str]]) -> str:
    """
    Render a salary value, or the placeholder when it is absent.

    Integral floats lose their trailing ".0" (1200000.0 -> "1200000").
    Only None and blank text count as absent: a salary of 0 is a value and
    renders as "0" rather than the placeholder.
    """
    if salary is None:
        return NOT_SPECIFIED
    if isinstance(salary, float) and salary.is_integer():
        return str(int(salary))
    if isinstance(salary, str):
        return _text_or_placeholder(salary)
    return str(salary)


def format_job_listing(listing: JobListing) -> str:
    """Render a single listing as one context block."""
    return JOB_LISTING_TEXT_FORMAT.format(
        title=_text_or_placeholder(listing.title),
        company=_text_or_placeholder(listing.company),
        location=format_location(listing.location),
        salary=format_salary(listing.salary),
        link=_text_or_placeholder(listing.link),
        separator=BLOCK_SEPARATOR,
    )


def render_job_context(listings: Sequence[JobListing]) -> str:
    """
    Render all listings, in input order, into a single context string.

    Args:
        listings: Listings as returned by the repository

    Returns:
        The concatenated blocks, joined with a newline.
    """
    return "\n".join(format_job_listing(listing) for listing in listings)
