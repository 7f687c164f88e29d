"""
Shared utilities for the Job Opening Assistant.
"""
