"""
Job Management Repositories

Repository interface for job persistence.
Concrete implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from .entities import Job
from .value_objects import JobId


class JobRepository(ABC):
    """
    Abstract repository interface for job persistence.

    ``timeout`` is the caller's remaining time budget in seconds, or None
    for no limit. Implementations raise RepositoryError when the store
    fails and JobDecodeError when a stored document is malformed.
    """

    @abstractmethod
    def insert(self, job: Job, timeout: Optional[float] = None) -> Job:
        """
        Insert a new job.

        Args:
            job: Job without an identifier

        Returns:
            The job carrying the store-assigned identifier
        """
        pass  # pragma: no cover

    @abstractmethod
    def get(self, job_id: JobId, timeout: Optional[float] = None) -> Optional[Job]:
        """
        Retrieve a job by ID.

        Returns:
            Job if found, None otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def update(self, job: Job, timeout: Optional[float] = None) -> Optional[Job]:
        """
        Atomically overwrite name, owner and description of a stored job.

        Args:
            job: Job carrying the identifier and the new field values

        Returns:
            The job as stored after the update, None if no job matched
        """
        pass  # pragma: no cover

    @abstractmethod
    def delete(self, job_id: JobId, timeout: Optional[float] = None) -> bool:
        """
        Delete at most one job.

        Returns:
            True if a job was removed, False if none matched
        """
        pass  # pragma: no cover

    @abstractmethod
    def iter_all(self, timeout: Optional[float] = None) -> Iterator[Job]:
        """
        Lazily iterate over every stored job, in no particular order.

        Decoding happens per record; a malformed record raises
        JobDecodeError and ends the iteration.
        """
        pass  # pragma: no cover

    @abstractmethod
    def ping(self, timeout: Optional[float] = None) -> bool:
        """Check whether the store is reachable."""
        pass  # pragma: no cover
