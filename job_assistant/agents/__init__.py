"""
LLM prompt templates for the Job Opening Assistant.
"""
