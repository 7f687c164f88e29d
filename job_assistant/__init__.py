"""
Job Opening Assistant.

Answers free-text questions about job openings by reading listings from
MongoDB, rendering them into a prompt context and asking Gemini for a
recommendation.
"""

__version__ = "0.1.0"
