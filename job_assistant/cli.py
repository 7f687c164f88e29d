"""
Command-line entry point for the Job Opening Assistant.

Usage:
    job-assistant "jobs in gurgaon"
    python -m job_assistant.cli "remote data engineer roles"

The recommendation (or the no-openings message) goes to stdout. Logs and
failure diagnostics go to stderr, and failures exit with status 1.
"""

import argparse
import logging
import sys
from typing import List, Optional

from job_assistant.config import Settings
from job_assistant.exceptions import JobAssistantError
from job_assistant.services.job_query_service import build_job_query_service
from job_assistant.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="job-assistant",
        description="Recommend open job listings for a natural-language query",
    )
    parser.add_argument("query", help='The question to answer, e.g. "jobs in gurgaon"')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
        configure_logging(settings.LOG_LEVEL)

        service = build_job_query_service(settings)
        response = service.run(args.query)
    except JobAssistantError as e:
        print(f"Application error ({e.kind}): {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error while answering job query")
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    if response.status == "ERROR":
        print(f"Application error ({response.error_kind}): {response.message}", file=sys.stderr)
        return 1

    if response.status == "NO_OPENINGS":
        print(response.message)
        return 0

    print(response.recommendation)
    return 0


if __name__ == "__main__":
    sys.exit(main())
