"""
Job Match - Single-shot LLM recommendation

This module contains the prompt templates for the Gemini-based job matcher.

The client that sends these prompts is in:
- job_assistant/services/recommendation_client.py
"""

from job_assistant.agents.job_match.prompts import (
    JOB_MATCH_SYSTEM_PROMPT,
    build_job_match_user_prompt,
)

__all__ = [
    "JOB_MATCH_SYSTEM_PROMPT",
    "build_job_match_user_prompt",
]
