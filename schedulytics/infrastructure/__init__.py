"""Infrastructure layer for MongoDB."""

from .mongo_connection import MongoConnectionManager
from .mongo_job_repository import MongoJobRepository

__all__ = [
    "MongoConnectionManager",
    "MongoJobRepository",
]
