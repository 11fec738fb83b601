"""
Test fixtures package.

Provides factory functions, mock implementations, and assertion helpers for testing.
"""

from .domain_fixtures import (
    create_job,
    create_job_id,
    create_job_document,
)
from .mock_repositories import MockJobRepository
from .grpc_fixtures import FakeAbort, FakeServicerContext
from .assertion_helpers import (
    assert_job_fields,
    assert_valid_job_id,
    assert_jobs_match,
)

__all__ = [
    "create_job",
    "create_job_id",
    "create_job_document",
    "MockJobRepository",
    "FakeAbort",
    "FakeServicerContext",
    "assert_job_fields",
    "assert_valid_job_id",
    "assert_jobs_match",
]
