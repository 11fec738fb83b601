"""
Job Application Service

Coordinates the job CRUD use cases and translates domain failures into
categorized application errors.
"""

import logging
from contextlib import closing
from typing import Iterator, Optional

from ..domain.errors import (
    InternalError,
    InvalidArgumentError,
    InvalidJobIdError,
    JobDecodeError,
    JobNotFoundError,
    RepositoryError,
    StreamUnavailableError,
)
from ..domain.job_management import Job, JobId, JobRepository

logger = logging.getLogger(__name__)


class JobService:
    """
    Application service for job operations.

    Holds no state besides the repository handle, so one instance serves
    every concurrent request. Each operation round-trips to the store.
    """

    def __init__(self, job_repository: JobRepository):
        """
        Initialize JobService with a repository.

        Args:
            job_repository: Repository for job persistence
        """
        self.job_repo = job_repository

    def create_job(self, job: Job, timeout: Optional[float] = None) -> Job:
        """
        Create a new job.

        Any identifier on the incoming job is discarded; the store assigns one.

        Args:
            job: Job fields to store
            timeout: Caller's remaining time in seconds

        Returns:
            The stored job with its identifier

        Raises:
            InternalError: If the insert fails
        """
        new_job = Job.new(job.name, job.owner, job.description)
        try:
            created = self.job_repo.insert(new_job, timeout)
        except RepositoryError as e:
            logger.error(f"Error creating job: {e}")
            raise InternalError(str(e)) from e

        logger.info(f"Created job {created.job_id}")
        return created

    def read_job(self, job_id: str, timeout: Optional[float] = None) -> Job:
        """
        Read one job by its string identifier.

        Raises:
            InvalidArgumentError: If job_id is malformed
            JobNotFoundError: If no job matches or the stored job cannot be decoded
            InternalError: If the store fails
        """
        oid = self._parse_id(job_id, "Could not convert to ObjectId")

        try:
            job = self.job_repo.get(oid, timeout)
        except JobDecodeError as e:
            logger.warning(f"Job {job_id} could not be decoded: {e}")
            raise JobNotFoundError(
                f"Could not find Job with Object Id {job_id}: {e}"
            ) from e
        except RepositoryError as e:
            logger.error(f"Error reading job {job_id}: {e}")
            raise InternalError(str(e)) from e

        if job is None:
            logger.warning(f"Job not found: {job_id}")
            raise JobNotFoundError(
                f"Could not find Job with Object Id {job_id}: no document matched"
            )

        logger.debug(f"Read job {job_id}")
        return job

    def update_job(
        self, job_id: str, changes: Job, timeout: Optional[float] = None
    ) -> Job:
        """
        Overwrite name, owner and description of an existing job.

        All three fields are always written. Callers wanting to change a
        single field read the job first and send back the full set.

        Args:
            job_id: String identifier of the job to update
            changes: Job carrying the new values; its own id is ignored

        Returns:
            The job as stored after the update

        Raises:
            InvalidArgumentError: If job_id is malformed
            JobNotFoundError: If no job matches
            InternalError: If the store fails
        """
        oid = self._parse_id(
            job_id, "Could not convert the supplied Job id to a MongoDB ObjectId"
        )
        job = changes.with_id(oid)

        try:
            updated = self.job_repo.update(job, timeout)
        except JobDecodeError as e:
            logger.warning(f"Updated job {job_id} could not be decoded: {e}")
            raise JobNotFoundError(f"Could not find Job with supplied ID: {e}") from e
        except RepositoryError as e:
            logger.error(f"Error updating job {job_id}: {e}")
            raise InternalError(str(e)) from e

        if updated is None:
            logger.warning(f"Job not found when updating: {job_id}")
            raise JobNotFoundError(f"Could not find Job with supplied ID: {job_id}")

        logger.info(f"Updated job {updated.job_id}")
        return updated

    def delete_job(self, job_id: str, timeout: Optional[float] = None) -> bool:
        """
        Delete a job.

        Deleting an identifier that matches nothing, including one that was
        already deleted, raises JobNotFoundError.

        Returns:
            True once the job has been removed

        Raises:
            InvalidArgumentError: If job_id is malformed
            JobNotFoundError: If no job matches
            InternalError: If the store fails
        """
        oid = self._parse_id(job_id, "Could not convert to ObjectId")

        try:
            deleted = self.job_repo.delete(oid, timeout)
        except RepositoryError as e:
            logger.error(f"Error deleting job {job_id}: {e}")
            raise InternalError(
                f"Could not delete Job with id {job_id}: {e}"
            ) from e

        if not deleted:
            logger.warning(f"Job not found when deleting: {job_id}")
            raise JobNotFoundError(f"Could not find/delete Job with id {job_id}")

        logger.info(f"Deleted job {job_id}")
        return True

    def list_jobs(self, timeout: Optional[float] = None) -> Iterator[Job]:
        """
        Lazily stream every stored job.

        The returned iterator is finite and cannot be restarted. Closing it
        releases the underlying cursor.

        Raises:
            InternalError: If the query or the cursor fails
            StreamUnavailableError: If a record cannot be decoded; the
                stream ends there
        """
        try:
            jobs = self.job_repo.iter_all(timeout)
        except RepositoryError as e:
            logger.error(f"Error listing jobs: {e}")
            raise InternalError(str(e)) from e

        return self._stream(jobs)

    def check_health(self, timeout: Optional[float] = None) -> bool:
        """Return True if the job store is reachable."""
        return self.job_repo.ping(timeout)

    def _stream(self, jobs: Iterator[Job]) -> Iterator[Job]:
        count = 0
        with closing(jobs):
            while True:
                try:
                    job = next(jobs)
                except StopIteration:
                    break
                except JobDecodeError as e:
                    logger.error(f"Aborting job stream after {count} jobs: {e}")
                    raise StreamUnavailableError(
                        f"Could not decode data: {e}"
                    ) from e
                except RepositoryError as e:
                    logger.error(f"Aborting job stream after {count} jobs: {e}")
                    raise InternalError(str(e)) from e

                count += 1
                yield job

        logger.debug(f"Streamed {count} jobs")

    @staticmethod
    def _parse_id(job_id: str, message: str) -> JobId:
        try:
            return JobId.parse(job_id)
        except InvalidJobIdError as e:
            logger.warning(f"Rejected job id {job_id!r}: {e}")
            raise InvalidArgumentError(f"{message}: {e}") from e
