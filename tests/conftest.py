"""
Shared pytest fixtures and configuration for the schedulytics test suite.

This module provides:
- Hypothesis configuration for property-based testing
- Shared fixtures for jobs, the in-memory repository and the job service
"""

import pytest

# Hypothesis configuration
from hypothesis import settings, HealthCheck

from schedulytics.application.job_service import JobService

from tests.fixtures import MockJobRepository, create_job

# Register Hypothesis profiles
settings.register_profile(
    "default",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "dev",
    max_examples=10,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("default")


# =============================================================================
# Repository and Service Fixtures
# =============================================================================

@pytest.fixture
def job_repository() -> MockJobRepository:
    """Provide an empty in-memory job repository."""
    return MockJobRepository()


@pytest.fixture
def job_service(job_repository) -> JobService:
    """Provide a JobService backed by the in-memory repository."""
    return JobService(job_repository)


@pytest.fixture
def sample_job():
    """Provide the job used throughout the testable properties."""
    return create_job(name="A", owner="B", description="C")


@pytest.fixture
def stored_job(job_service, sample_job):
    """Provide a job that has already been created."""
    return job_service.create_job(sample_job)
