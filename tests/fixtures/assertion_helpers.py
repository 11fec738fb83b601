"""
Assertion Helpers

Reusable assertions for jobs and identifiers.
"""

import re
from typing import Iterable

from schedulytics.domain.job_management import Job

OBJECT_ID_HEX = re.compile(r"^[0-9a-f]{24}$")


def assert_valid_job_id(job_id: str) -> None:
    """Assert a wire identifier is a non-empty ObjectId hex string."""
    assert job_id, "job id is empty"
    assert OBJECT_ID_HEX.match(job_id), f"job id {job_id!r} is not an ObjectId hex string"


def assert_job_fields(job, name: str, owner: str, description: str) -> None:
    """Assert the text fields of a Job entity or Job message."""
    assert job.name == name, f"name: expected {name!r}, got {job.name!r}"
    assert job.owner == owner, f"owner: expected {owner!r}, got {job.owner!r}"
    assert job.description == description, (
        f"description: expected {description!r}, got {job.description!r}"
    )


def assert_jobs_match(actual: Iterable[Job], expected: Iterable[Job]) -> None:
    """Assert two collections hold the same jobs, ignoring order."""
    def key(job: Job):
        return (str(job.job_id), job.name, job.owner, job.description)

    assert sorted(map(key, actual)) == sorted(map(key, expected))
