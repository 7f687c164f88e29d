"""
Recommendation Client - Gemini job matching

Sends the rendered job context and the user's query to Gemini and returns
the model's recommendation text.

Architecture:
- Pattern: Single LLM call (one system instruction + one user message)
- Model: Gemini 2.5 Flash
- API: Google Gen AI Python SDK (google-genai)
- Temperature: 0.2 (near-deterministic for repeatable matching)
- Output: Plain text taken from the first candidate

Request parameters are module constants, never derived from input, so the
same context and query always produce the same request.
"""

import logging
from typing import Optional, Protocol

from google import genai
from google.genai import types

from job_assistant.agents.job_match.prompts import (
    JOB_MATCH_SYSTEM_PROMPT,
    build_job_match_user_prompt,
)
from job_assistant.exceptions import ConfigurationError, ExternalServiceError

logger = logging.getLogger(__name__)

GEMINI_MODEL = "gemini-2.5-flash"
TEMPERATURE = 0.2
MAX_OUTPUT_TOKENS = 1024
# Thinking tokens count against max_output_tokens on 2.5 models
THINKING_BUDGET = 0
REQUEST_TIMEOUT_MS = 60_000


class RecommendationClient(Protocol):
    """Turns a job context and a user query into recommendation text."""

    def generate(self, context: str, query: str) -> str:
        ...


def _extract_response_text(response) -> Optional[str]:
    """Return the first candidate's text, or None when there is none."""
    if not response.candidates:
        return None

    candidate = response.candidates[0]
    if candidate.content and candidate.content.parts:
        for part in candidate.content.parts:
            if getattr(part, "text", None):
                return part.text

    return None


class GeminiRecommendationClient:
    """RecommendationClient backed by the Gemini API."""

    def __init__(self, api_key: Optional[str], client: Optional[genai.Client] = None):
        """
        Args:
            api_key: Gemini API key (required even when ``client`` is given)
            client: Pre-built genai.Client, mainly for tests

        Raises:
            ConfigurationError: If the API key is empty.
        """
        if not api_key:
            raise ConfigurationError("GOOGLE_API_KEY environment variable is not set")

        if client is None:
            client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=REQUEST_TIMEOUT_MS),
            )

        self._client = client

    def generate(self, context: str, query: str) -> str:
        """
        Ask Gemini to recommend openings from ``context`` for ``query``.

        Args:
            context: Rendered job openings
            query: The user's question, unmodified

        Returns:
            The model's recommendation text.

        Raises:
            ExternalServiceError: If the call fails or returns no text.
        """
        config = types.GenerateContentConfig(
            system_instruction=JOB_MATCH_SYSTEM_PROMPT,
            temperature=TEMPERATURE,
            max_output_tokens=MAX_OUTPUT_TOKENS,
            thinking_config=types.ThinkingConfig(thinking_budget=THINKING_BUDGET),
        )

        logger.info(f"Calling Gemini API ({GEMINI_MODEL}) for query='{query[:50]}'")

        try:
            response = self._client.models.generate_content(
                model=GEMINI_MODEL,
                contents=build_job_match_user_prompt(context, query),
                config=config,
            )
        except Exception as e:
            logger.error(f"Error calling Gemini API: {e}")
            raise ExternalServiceError("Gemini request failed", cause=e) from e

        text = _extract_response_text(response)
        if not text:
            logger.error("Empty response from Gemini API")
            raise ExternalServiceError("Gemini returned no usable response")

        logger.info(f"Gemini returned {len(text)} characters")
        return text
