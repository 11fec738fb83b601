"""
MongoDB Connection Management

Owns the MongoClient shared by every repository. MongoClient keeps its own
connection pool and is safe to use from many threads at once.
"""

import logging
from typing import Any, Optional

import pymongo
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class MongoConnectionManager:
    """Manages a MongoDB client and hands out collection handles."""

    def __init__(self, uri: str, **client_kwargs: Any):
        self.uri = uri
        self._client_kwargs = client_kwargs
        self._client: Optional[MongoClient] = None

    @property
    def client(self) -> MongoClient:
        """Get the MongoClient, creating it on first use."""
        if self._client is None:
            self._client = MongoClient(self.uri, **self._client_kwargs)
        return self._client

    def collection(self, database: str, name: str) -> Collection:
        """Bind a collection handle for repositories."""
        return self.client[database][name]

    def health_check(self, timeout: Optional[float] = None) -> bool:
        """Check if MongoDB answers a ping."""
        try:
            with pymongo.timeout(timeout):
                self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def close(self) -> None:
        """Close the client and its connection pool."""
        if self._client is not None:
            self._client.close()
            self._client = None
