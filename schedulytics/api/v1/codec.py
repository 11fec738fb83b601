"""
Conversion between Job protobuf messages and Job entities.

Identifiers cross this boundary as strings; parsing them into JobId is left
to the job service so that malformed ids surface as invalid-argument errors
from a single place.
"""

from ...domain.job_management import Job
from .protos import schedulytics_pb2


def job_to_message(job: Job) -> "schedulytics_pb2.Job":
    """Entity to wire message; an entity without identifier gets an empty id."""
    return schedulytics_pb2.Job(
        id=str(job.job_id) if job.job_id is not None else "",
        name=job.name,
        owner=job.owner,
        description=job.description,
    )


def job_from_message(message: "schedulytics_pb2.Job") -> Job:
    """
    Wire message to entity without identifier.

    Any id carried by the message is dropped; read it from ``message.id``.
    """
    return Job.new(
        name=message.name,
        owner=message.owner,
        description=message.description,
    )
