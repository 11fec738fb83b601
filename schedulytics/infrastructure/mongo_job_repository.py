"""
MongoDB Job Repository Implementation

Concrete MongoDB-based implementation of JobRepository interface.
Single-document atomicity is provided by MongoDB itself.
"""

import logging
from typing import Any, Dict, Iterator, Optional

import pymongo
from bson.errors import BSONError
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.cursor import Cursor
from pymongo.errors import PyMongoError

from ..domain.errors import JobDecodeError, RepositoryError
from ..domain.job_management.entities import Job
from ..domain.job_management.repositories import JobRepository
from ..domain.job_management.value_objects import JobId

logger = logging.getLogger(__name__)


class MongoJobRepository(JobRepository):
    """
    MongoDB-based implementation of JobRepository.

    Every call is bounded by the caller's remaining time when one is given.
    """

    def __init__(self, collection: Collection):
        """
        Initialize with a bound collection.

        Args:
            collection: pymongo Collection holding job documents
        """
        self.collection = collection

    def insert(self, job: Job, timeout: Optional[float] = None) -> Job:
        """Insert a job and return it with the store-assigned identifier."""
        document = job.to_document()
        document.pop("_id", None)

        try:
            with pymongo.timeout(timeout):
                result = self.collection.insert_one(document)
        except PyMongoError as e:
            raise RepositoryError(f"Internal error: {e}", e) from e

        return job.with_id(JobId.from_object_id(result.inserted_id))

    def get(self, job_id: JobId, timeout: Optional[float] = None) -> Optional[Job]:
        """Retrieve a job from MongoDB."""
        try:
            with pymongo.timeout(timeout):
                document = self.collection.find_one({"_id": job_id.value})
        except PyMongoError as e:
            raise RepositoryError(f"Could not read job {job_id}: {e}", e) from e
        except BSONError as e:
            raise JobDecodeError(f"Invalid BSON in job {job_id}: {e}", e) from e

        if document is None:
            return None
        return Job.from_document(document)

    def update(self, job: Job, timeout: Optional[float] = None) -> Optional[Job]:
        """
        Overwrite all text fields and return the post-update document.

        Uses findOneAndUpdate so the returned state is the one written.
        """
        try:
            with pymongo.timeout(timeout):
                document = self.collection.find_one_and_update(
                    {"_id": job.job_id.value},
                    {"$set": job.to_update_fields()},
                    return_document=ReturnDocument.AFTER,
                )
        except PyMongoError as e:
            raise RepositoryError(f"Could not update job {job.job_id}: {e}", e) from e
        except BSONError as e:
            raise JobDecodeError(f"Invalid BSON in job {job.job_id}: {e}", e) from e

        if document is None:
            return None
        return Job.from_document(document)

    def delete(self, job_id: JobId, timeout: Optional[float] = None) -> bool:
        """Delete a job from MongoDB."""
        try:
            with pymongo.timeout(timeout):
                result = self.collection.delete_one({"_id": job_id.value})
        except PyMongoError as e:
            raise RepositoryError(f"Could not delete job {job_id}: {e}", e) from e

        return result.deleted_count == 1

    def iter_all(self, timeout: Optional[float] = None) -> Iterator[Job]:
        """
        Stream every job document through a cursor.

        The cursor is opened here and read lazily by the returned iterator.
        """
        try:
            cursor = self.collection.find({}, **self._cursor_options(timeout))
        except PyMongoError as e:
            raise RepositoryError(f"Unknown internal error: {e}", e) from e

        return self._iter_cursor(cursor)

    def ping(self, timeout: Optional[float] = None) -> bool:
        try:
            with pymongo.timeout(timeout):
                self.collection.database.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"Job store ping failed: {e}")
            return False

    @staticmethod
    def _cursor_options(timeout: Optional[float]) -> Dict[str, Any]:
        # maxTimeMS=0 disables the server-side limit
        if timeout is None:
            return {}
        return {"max_time_ms": max(int(timeout * 1000), 1)}

    def _iter_cursor(self, cursor: Cursor) -> Iterator[Job]:
        try:
            while True:
                try:
                    document = next(cursor)
                except StopIteration:
                    return
                except PyMongoError as e:
                    raise RepositoryError(f"Unknown cursor error: {e}", e) from e
                except BSONError as e:
                    raise JobDecodeError(f"Invalid BSON in job cursor: {e}", e) from e

                yield Job.from_document(document)
        finally:
            cursor.close()
