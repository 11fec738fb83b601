"""
Job Management Entities

Domain entity for jobs and its persistence-level representation.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from bson import ObjectId

from ..errors import JobDecodeError
from .value_objects import JobId

TEXT_FIELDS = ("name", "owner", "description")


@dataclass(frozen=True)
class Job:
    """
    Entity representing a job.

    ``job_id`` is None until the store has assigned one.
    """

    job_id: Optional[JobId]
    name: str
    owner: str
    description: str

    @classmethod
    def new(cls, name: str, owner: str, description: str) -> "Job":
        """
        Factory method for a job that has not been stored yet.

        Args:
            name: Job name
            owner: Job owner
            description: Free-form description

        Returns:
            Job without an identifier
        """
        return cls(job_id=None, name=name, owner=owner, description=description)

    def with_id(self, job_id: JobId) -> "Job":
        """Return a copy of this job carrying the given identifier."""
        return replace(self, job_id=job_id)

    def to_update_fields(self) -> Dict[str, str]:
        """Fields overwritten by an update, always all three."""
        return {
            "name": self.name,
            "owner": self.owner,
            "description": self.description,
        }

    def to_document(self) -> Dict[str, Any]:
        """
        Convert to a store document.

        ``_id`` is left out when the job has no identifier so the store
        assigns one on insert.
        """
        document: Dict[str, Any] = {}
        if self.job_id is not None:
            document["_id"] = self.job_id.value
        document.update(self.to_update_fields())
        return document

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Job":
        """
        Create a Job from a store document.

        Missing text fields decode as empty strings.

        Raises:
            JobDecodeError: If the identifier is missing or a field has
                the wrong type
        """
        if document is None:
            raise JobDecodeError("Cannot decode job from empty document")

        oid = document.get("_id")
        if not isinstance(oid, ObjectId):
            raise JobDecodeError(
                f"Document _id must be an ObjectId, got {type(oid).__name__}"
            )

        values = {}
        for field in TEXT_FIELDS:
            value = document.get(field, "")
            if not isinstance(value, str):
                raise JobDecodeError(
                    f"Document {oid} field '{field}' must be a string, "
                    f"got {type(value).__name__}"
                )
            values[field] = value

        return cls(job_id=JobId.from_object_id(oid), **values)
