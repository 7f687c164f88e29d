"""
Logging utilities for the Job Opening Assistant.

Log records go to stderr so that the CLI can keep stdout for the
recommendation text alone.

Logging rules:
- NEVER log the Gemini API key or the MongoDB connection string
- NEVER log the full rendered job context (it can be large)
- Log pipeline steps, listing counts and sanitized error messages
"""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure the root logger once for the whole process.

    Args:
        level: Logging level as int or name (e.g. "DEBUG")
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
    )

