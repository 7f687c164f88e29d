"""
Database access layer for the Job Opening Assistant.

The jobs collection is read-only from this package's point of view:
nothing here inserts, updates or deletes documents.

Includes:
- ConnectionManager protocol and its pymongo implementation
- MongoDB connection string validation
"""

from .client import ConnectionManager, MongoConnectionManager, validate_mongodb_uri

__all__ = ["ConnectionManager", "MongoConnectionManager", "validate_mongodb_uri"]
